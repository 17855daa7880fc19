# visualizer.py
import pygame

# Color scheme
COLORS = {
    'background': (20, 20, 30),
    'panel': (40, 40, 50),
    'text': (220, 220, 220),
    'unstarted': (100, 100, 100),
    'ready': (70, 130, 180),
    'running': (50, 205, 50),
    'blocked': (255, 165, 0),
    'terminated': (147, 112, 219),
    'timeline_bg': (30, 30, 40),
    'grid': (60, 60, 70)
}


class PygameVisualizer:
    def __init__(self, scheduler, width=1200, height=860, fps=2):
        pygame.init()
        self.scheduler = scheduler
        self.width = width
        self.height = height
        self.fps = fps

        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(f"Scheduler - {scheduler.name}")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 24)
        self.font_small = pygame.font.Font(None, 18)
        self.font_large = pygame.font.Font(None, 32)

        self.running = True
        self.paused = False
        self.step_mode = False

        # recent snapshots for the CPU timeline
        self.timeline_history = []
        self.max_timeline_length = 100

    def draw_text(self, text, x, y, color=None, font=None):
        if color is None:
            color = COLORS['text']
        if font is None:
            font = self.font
        text_surface = font.render(str(text), True, color)
        self.screen.blit(text_surface, (x, y))

    def draw_panel(self, x, y, width, height, title):
        """Draw a panel with title"""
        pygame.draw.rect(self.screen, COLORS['panel'], (x, y, width, height))
        pygame.draw.rect(self.screen, COLORS['grid'], (x, y, width, height), 2)
        self.draw_text(title, x + 10, y + 5, font=self.font_small)

    def draw_process_box(self, pid, x, y, width, height, state):
        color = COLORS.get(state, COLORS['panel'])
        pygame.draw.rect(self.screen, color, (x, y, width, height))
        pygame.draw.rect(self.screen, COLORS['text'], (x, y, width, height), 1)

        text = f"P{pid}" if pid is not None else "IDLE"
        text_surface = self.font_small.render(text, True, COLORS['text'])
        text_rect = text_surface.get_rect(center=(x + width // 2, y + height // 2))
        self.screen.blit(text_surface, text_rect)

    def draw_queue_area(self, x, y, width, height, title, pids, state):
        """Draw a queue, head on the left, wrapping onto new rows"""
        self.draw_panel(x, y, width, height, title)

        box_width = 50
        box_height = 34
        spacing = 6
        per_row = max(1, (width - 20) // (box_width + spacing))

        for i, pid in enumerate(pids):
            row, col = divmod(i, per_row)
            px = x + 10 + col * (box_width + spacing)
            py = y + 28 + row * (box_height + spacing)
            if py + box_height > y + height:
                self.draw_text(f"+{len(pids) - i} more", px, py - spacing, font=self.font_small)
                break
            self.draw_process_box(pid, px, py, box_width, box_height, state)

    def draw_timeline(self, x, y, width, height):
        """One row per process, green where it held the CPU"""
        self.draw_panel(x, y, width, height, "CPU Timeline (Recent History)")

        if not self.timeline_history:
            return

        timeline_y = y + 30
        bar_height = 16
        margin = 2
        bar_width = max(5, (width - 60) // self.max_timeline_length)

        pids = sorted({s['running'] for s in self.timeline_history if s['running'] is not None})
        for idx, pid in enumerate(pids):
            py = timeline_y + idx * (bar_height + margin)
            if py + bar_height >= y + height - 20:
                break
            self.draw_text(f"P{pid}", x + 10, py + 2, font=self.font_small)
            for i, snapshot in enumerate(self.timeline_history):
                bx = x + 50 + i * bar_width
                color = COLORS['running'] if snapshot['running'] == pid else COLORS['timeline_bg']
                pygame.draw.rect(self.screen, color, (bx, py, bar_width - 1, bar_height))

        step = max(1, len(self.timeline_history) // 10)
        for i in range(0, len(self.timeline_history), step):
            mx = x + 50 + i * bar_width
            self.draw_text(str(self.timeline_history[i]['clock']), mx, y + height - 18, font=self.font_small)

    def draw_stats(self, x, y, width, height):
        self.draw_panel(x, y, width, height, "Statistics")

        ctx = self.scheduler.context
        stats = [
            f"Clock: {ctx.clock}",
            f"Started: {ctx.total_started}/{ctx.total_created}",
            f"Finished: {ctx.total_finished}/{ctx.total_created}",
            f"Cycles blocked: {ctx.cycles_blocked}",
        ]
        if self.scheduler.quantum is not None:
            stats.append(f"Quantum: {self.scheduler.quantum}")

        for i, stat in enumerate(stats):
            self.draw_text(stat, x + 10, y + 30 + i * 25, font=self.font_small)

    def draw_controls(self, x, y):
        controls = [
            "SPACE: Pause/Resume",
            "S: Step Forward",
            "UP/DOWN: Speed",
            "Q/ESC: Quit",
            f"Speed: {self.fps} FPS"
        ]
        for i, control in enumerate(controls):
            self.draw_text(control, x, y + i * 20, font=self.font_small)

    def draw_frame(self):
        self.screen.fill(COLORS['background'])
        snapshot = self.scheduler.snapshot()

        queue_width = 760
        queue_height = 110
        margin = 20

        areas = [
            ("Not Arrived", snapshot['not_arrived'], 'unstarted'),
            ("Ready Queue", snapshot['ready'], 'ready'),
            ("Blocked Queue", snapshot['blocked'], 'blocked'),
            ("Finished", snapshot['finished'], 'terminated'),
        ]
        for i, (title, pids, state) in enumerate(areas):
            qy = margin + 30 + i * (queue_height + margin)
            self.draw_queue_area(margin, qy, queue_width, queue_height, title, pids, state)

        side_x = queue_width + 2 * margin
        side_width = self.width - side_x - margin
        self.draw_panel(side_x, margin + 30, side_width, 90, "CPU")
        self.draw_process_box(snapshot['running'], side_x + 20, margin + 65, 80, 40,
                              'running' if snapshot['running'] is not None else 'panel')
        self.draw_stats(side_x, margin + 140, side_width, 170)
        self.draw_controls(side_x, margin + 330)

        timeline_height = 220
        self.draw_timeline(margin, self.height - timeline_height - margin,
                           self.width - 2 * margin, timeline_height)

        title = f"Process Scheduler Simulation - {self.scheduler.name}"
        if self.paused:
            title += " [PAUSED]"
        self.draw_text(title, margin, 10, font=self.font_large)

        pygame.display.flip()

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key == pygame.K_s:
                    self.step_mode = True
                elif event.key in (pygame.K_q, pygame.K_ESCAPE):
                    self.running = False
                elif event.key == pygame.K_UP:
                    self.fps = min(60, self.fps + 1)
                elif event.key == pygame.K_DOWN:
                    self.fps = max(1, self.fps - 1)

    def run_simulation(self):
        while self.running and self.scheduler.has_jobs():
            self.handle_events()

            if not self.paused or self.step_mode:
                self.scheduler.step()
                self.timeline_history.append(self.scheduler.snapshot())
                if len(self.timeline_history) > self.max_timeline_length:
                    self.timeline_history.pop(0)
                self.step_mode = False

            self.draw_frame()
            self.clock.tick(self.fps)

        # Wait for user to close
        while self.running:
            self.handle_events()
            self.draw_frame()

            completion_text = "SIMULATION COMPLETE - Press Q to exit"
            text_surface = self.font_large.render(completion_text, True, COLORS['running'])
            text_rect = text_surface.get_rect(center=(self.width // 2, self.height // 2))

            overlay = pygame.Surface((text_rect.width + 40, text_rect.height + 20))
            overlay.set_alpha(200)
            overlay.fill(COLORS['background'])
            self.screen.blit(overlay, (text_rect.x - 20, text_rect.y - 10))

            self.screen.blit(text_surface, text_rect)
            pygame.display.flip()
            self.clock.tick(10)

        pygame.quit()


def run_pygame_visualization(scheduler, fps=2):
    """
    Step a scheduler inside a pygame window until it finishes or the
    window is closed

    Args:
        scheduler: The scheduler instance to visualize
        fps: Frames per second (simulation speed)
    """
    visualizer = PygameVisualizer(scheduler, fps=fps)
    visualizer.run_simulation()
