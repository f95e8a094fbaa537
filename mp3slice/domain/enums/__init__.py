from mp3slice.domain.enums.probe_window import ProbeWindow
__all__ = [
    "ProbeWindow",
]
