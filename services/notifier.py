class Notifier:
    """User-visible, short-lived notifications.

    Presentation only: the caller has already logged whatever it reports.
    The UI passes a ToastNotifier.
    """

    def success(self, message: str) -> None:
        raise NotImplementedError

    def error(self, message: str) -> None:
        raise NotImplementedError
