"""
teapotd.py - Application entry point for Teapot-UI
--------------------------------------------------

Responsible for:
- parsing the command line (-h/--help, -B/--background)
- loading configuration from the environment
- wiring GPIO lines, LEDs, notifier and the event loop
- mapping fatal errors and signals to exit codes

Exit codes:
    0           help requested
    1           any startup or runtime fatal error
    128+signum  stopped by SIGINT/SIGTERM
"""

import argparse
import sys
import time
from typing import Callable, List, Mapping, Optional

# ---------------------------------------------------------------------------
# UTF-8 ENCODING FIX (important for Raspberry Pi)
# ---------------------------------------------------------------------------

# Log symbols are non-ASCII; the device console is not always UTF-8
if hasattr(sys.stdout, 'reconfigure') and sys.stdout.encoding.lower() != 'utf-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore
if hasattr(sys.stderr, 'reconfigure') and sys.stderr.encoding.lower() != 'utf-8':
    sys.stderr.reconfigure(encoding='utf-8')  # type: ignore

from hardware.gpio import IGPIOLine, SysfsGPIOLine
from hardware.input.edge_waiter import IEdgeWaiter, PollEdgeWaiter
from hardware.output.led import StatusLED
from lifecycle import ShutdownCoordinator, ShutdownRequested, daemonize
from lifecycle.handlers import GPIOShutdownHandler, LEDShutdownHandler
from managers import ConfigManager
from models.config import DaemonConfig
from models.enums import GPIODirection, LEDRole, LogCategory
from models.errors import DaemonError
from services import ButtonEventLoop, DebounceStateMachine, SSHNotifier, create_press_handler
from services.notifier import INotifier
from utils.clock import monotonic_ms
from utils.logger import get_logger, configure_logger

# ---------------------------------------------------------------------------
# LOGGER SETUP
# ---------------------------------------------------------------------------

log = get_logger().for_category(LogCategory.SYSTEM)

BANNER = (
    "Teapot-UI",
    "Copyright Reuben D'Netto 2015",
    "Published under Apache 2.0",
)

EXIT_OK = 0
EXIT_FAILURE = 1


# ---------------------------------------------------------------------------
# COMMAND LINE
# ---------------------------------------------------------------------------

class ArgumentParser(argparse.ArgumentParser):
    """argparse with the daemon's error convention (exit 1, not 2)."""

    def error(self, message: str):
        self.exit(EXIT_FAILURE, f"ERROR: {message}\n")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="teapotd",
        description="Watch the teapot button, drive the status LEDs and notify the user.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-B", "--background",
        action="store_true",
        help="Daemonize process",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse the command line.

    Raises:
        SystemExit: 0 for --help, 1 for an unknown argument
    """
    parser = build_parser()
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        parser.error(f"Unknown command line argument: '{unknown[0]}'")
    return args


# ---------------------------------------------------------------------------
# DAEMON
# ---------------------------------------------------------------------------

def run(
    config: DaemonConfig,
    notifier: Optional[INotifier] = None,
    waiter_factory: Callable[[IGPIOLine], IEdgeWaiter] = PollEdgeWaiter,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], int] = monotonic_ms,
    install_signals: bool = True,
) -> int:
    """
    Open the hardware, run the event loop and return the exit code.

    Only returns when the loop terminated (fatal error) or a signal stopped it.
    """
    button = None
    try:
        error_led = StatusLED(SysfsGPIOLine.open(config.error_led_path, GPIODirection.OUTPUT), LEDRole.ERROR)
        active_led = StatusLED(SysfsGPIOLine.open(config.active_led_path, GPIODirection.OUTPUT), LEDRole.ACTIVE)

        # Turn off error LED now that we're running
        error_led.off()

        button = SysfsGPIOLine.open(config.button_path, GPIODirection.INPUT)
        waiter = waiter_factory(button)
    except DaemonError as e:
        log.error(e.message, **e.details)
        if button is not None:
            button.close()
        return EXIT_FAILURE

    coordinator = ShutdownCoordinator()
    coordinator.register(LEDShutdownHandler(active_led))
    coordinator.register(GPIOShutdownHandler(button))

    press_handler = create_press_handler(
        config,
        active_led=active_led,
        error_led=error_led,
        notifier=notifier or SSHNotifier(),
        sleep=sleep,
    )

    loop = ButtonEventLoop(
        button=button,
        waiter=waiter,
        debouncer=DebounceStateMachine(config.policy, config.timing.debounce_window_ms),
        press_handler=press_handler,
        clock=clock,
    )

    try:
        if install_signals:
            coordinator.setup_signal_handlers()
        loop.run()
    except ShutdownRequested as e:
        coordinator.shutdown_all(reason=str(e))
        return e.exit_code
    except DaemonError as e:
        coordinator.shutdown_all(reason=e.code)
        return EXIT_FAILURE

    # loop.run() never returns normally
    return EXIT_FAILURE


# ---------------------------------------------------------------------------
# Application Entry
# ---------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """Parse arguments, load configuration and run the daemon."""
    for line in BANNER:
        log.info(line)

    try:
        args = parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_FAILURE

    try:
        if args.background:
            daemonize()

        config = ConfigManager(environ).load()
    except DaemonError as e:
        log.error(e.message, **e.details)
        return EXIT_FAILURE

    configure_logger(config.log_level, config.use_colors)
    log.info("Starting Teapot-UI daemon", policy=config.policy.value)

    return run(config)


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
