# gameclock/engine.py
# -*- coding: utf-8 -*-
"""
Главный цикл.

* Читает конфиг (display.fps, show_fps, v_sync).
* Создаёт Runtime и игровые часы, подписанные на «enterFrame».
* Без окна (headless) сам выдерживает целевую частоту кадров.
"""
import time
from gameclock.core.clock import Clock
from gameclock.core.host import get_timer, wall_time
from gameclock.core.runtime import Runtime
from gameclock.utils import logger, Config


class Engine:
    """
    Главный цикл: раз в кадр рассылает «enterFrame».
    """
    # -----------------------------------------------------------------
    def __init__(
        self,
        config: Config = None,
        headless: bool = False,
        title: str = None,
        frames: int = 0,
        sleep=time.sleep,
    ):
        self.cfg = config if config is not None else Config()
        display = self.cfg["display"]
        self.target_fps = self.cfg.target_fps

        if headless:
            self.window = None
            timer = get_timer
        else:
            self.window = self._create_window(
                display.get("width", 800),
                display.get("height", 600),
                title or display.get("title", "GameClock"),
            )
            self.window.set_vsync(bool(self.cfg.get("v_sync", True)))
            timer = self.window.get_timer

        self._timer = timer
        self._sleep = sleep
        self.runtime = Runtime(timer=timer)
        self.clock = Clock(self.runtime, target_fps=self.target_fps,
                           frames=frames, timer=timer)

        self.show_fps = bool(self.cfg.get("show_fps", True))
        self._last_fps_print = wall_time()
        self._running = False
        self._closed = False

    # -----------------------------------------------------------------
    def _create_window(self, w: int, h: int, title: str):
        from gameclock.window import Window
        return Window(w, h, title)

    # -----------------------------------------------------------------
    def run(self, max_frames: int = None):
        """Главный игровой цикл."""
        logger.info(f"[Engine] Engine started at {self.target_fps} fps")
        self._running = True
        frame_ms = 1000.0 / self.target_fps
        done = 0

        while self._running:
            if max_frames is not None and done >= max_frames:
                break

            frame_start = self._timer()

            if self.window:
                self.window.poll_events()
                if self.window.should_close():
                    break

            self.runtime.enter_frame()
            done += 1

            if self.window:
                self.window.swap_buffers()
            else:
                remaining = frame_ms - (self._timer() - frame_start)
                if remaining > 0:
                    self._sleep(remaining / 1000.0)

            if self.show_fps:
                now = wall_time()
                if now - self._last_fps_print >= 1.0:
                    logger.info(f"[Engine] FPS: {self.clock.get_fps():.2f}")
                    self._last_fps_print = now

        self.shutdown()
        return done

    def stop(self):
        """Остановить цикл после текущего кадра."""
        self._running = False

    # -----------------------------------------------------------------
    def shutdown(self):
        """Уничтожить часы и закрыть окно."""
        if self._closed:
            return
        self._closed = True
        self._running = False
        logger.info("[Engine] Shutting down")
        self.clock.destroy()
        if self.window:
            self.window.close()
            self.window.destroy()
