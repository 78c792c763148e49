"""Reference workload: timing random string generation at growing sizes.

Each loop gets its own titled timer that is timestamped after every
generated string, so the mean interval of a loop is the per-string cost.
"""

import random
import string

from benchtimer.registry import BenchTimer, ExecutionMode
from benchtimer.utils.logger import Logger

ALPHABET = string.ascii_letters + string.digits
MAIN_TITLE = "main"


def generate_string(length: int, rng: random.Random) -> str:
    """Return a random alphanumeric string of ``length`` characters."""
    return "".join(rng.choices(ALPHABET, k=length))


def loop_title(index: int, length: int) -> str:
    return f"loop #{index}, size {length}"


def run_string_benchmark(
    registry: BenchTimer,
    loops: int = 5,
    base_length: int = 20,
    iterations: int = 100_000,
    rng: random.Random | None = None,
    mode: ExecutionMode = ExecutionMode.CONCURRENT,
) -> list[str]:
    """Time string generation for ``loops`` increasing lengths.

    A ``"main"`` timer spans the whole run. Loop ``i`` generates
    ``iterations`` strings of ``base_length * i`` characters.

    Args:
        registry: Registry that receives the timers.
        loops: Number of loops (string sizes).
        base_length: Length multiplier per loop.
        iterations: Strings generated per loop.
        rng: Random source; a fresh unseeded one by default.
        mode: Execution mode for the closing ``stop_all``.

    Returns:
        Titles registered, in creation order.

    Raises:
        ValueError: If loops, base_length or iterations is negative.
    """
    if loops < 0 or base_length < 0 or iterations < 0:
        raise ValueError(
            f"loops, base_length and iterations must be >= 0, "
            f"got {loops}, {base_length}, {iterations}"
        )
    rng = rng or random.Random()

    registry.add(MAIN_TITLE).start()
    titles = [MAIN_TITLE]

    for index in range(1, loops + 1):
        length = base_length * index
        title = loop_title(index, length)
        timer = registry.add(title)
        timer.start()
        for _ in range(iterations):
            generate_string(length, rng)
            timer.timestamp()
        timer.stop()
        titles.append(title)
        Logger.debug_if_configured("workload", f"{title}: {len(timer)} samples")

    registry.stop_all(mode)
    return titles
