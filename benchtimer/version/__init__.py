from benchtimer.version.benchtimer_version import BENCHTIMER_VERSION, Version

__all__ = ["BENCHTIMER_VERSION", "Version"]
