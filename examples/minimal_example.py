import gameclock as gc
from gameclock.utils import logger


def report(clock):
    """Раз в секунду игрового времени печатаем состояние часов."""
    def on_frame(event):
        if event.frame % max(1, int(round(clock.target_fps))) == 0:
            duration = clock.frames_to_duration()
            logger.info(
                f"frame={clock.get_frames()} dt={clock.delta():.2f} "
                f"fps={clock.get_fps():.1f} {duration}"
            )
    return on_frame


if __name__ == "__main__":
    logger.info("Starting minimal example...")

    engine = gc.Engine(headless=True)
    engine.runtime.add_event_listener(gc.ENTER_FRAME, report(engine.clock))
    engine.run(max_frames=engine.target_fps * 3)

    # Часы уже уничтожены в shutdown() – показываем результат нового экземпляра
    clock = gc.Clock(gc.Runtime(), target_fps=60, frames=60 * 90)
    logger.info(f"Game date x60: {clock.to_game_date(0, 60, '!%H:%M:%S')}")
    clock.destroy()
