"""
Окно + GLFW‑контекст. Источник кадров и таймера для Engine.
"""

import glfw

class Window:
    """Окно + GLFW‑контекст."""
    def __init__(self, width: int = 800, height: int = 600, title: str = "GameClock"):
        if not glfw.init():
            raise RuntimeError("Failed to initialize GLFW")

        self.handle = glfw.create_window(width, height, title, None, None)
        if not self.handle:
            glfw.terminate()
            raise RuntimeError("Failed to create GLFW window")
        glfw.make_context_current(self.handle)

        self.width, self.height = width, height
        self.title = title

        glfw.set_framebuffer_size_callback(self.handle, self._on_resize)
        self.set_vsync(True)

    def _on_resize(self, _win, w, h):
        self.width, self.height = w, h

    def set_vsync(self, enable: bool = True):
        glfw.swap_interval(1 if enable else 0)

    def get_timer(self) -> float:
        """Миллисекунды с момента glfw.init()."""
        return glfw.get_time() * 1000.0

    def should_close(self) -> bool:
        return glfw.window_should_close(self.handle)

    def swap_buffers(self):
        glfw.swap_buffers(self.handle)

    def poll_events(self):
        glfw.poll_events()

    def close(self):
        glfw.set_window_should_close(self.handle, True)

    def destroy(self):
        if self.handle:
            glfw.destroy_window(self.handle)
            self.handle = None
        glfw.terminate()
