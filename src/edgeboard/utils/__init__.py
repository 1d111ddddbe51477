from edgeboard.utils.formatting import byte_size_label, relative_time

__all__ = ["byte_size_label", "relative_time"]
