from .progress_notifier import ProgressNotifier

__all__ = ["ProgressNotifier"]
