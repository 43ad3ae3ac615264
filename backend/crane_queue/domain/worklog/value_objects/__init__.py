from .enums import Shift, WorkLogStatus

__all__ = ["Shift", "WorkLogStatus"]
