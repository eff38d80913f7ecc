class DirServeError(Exception):
    """Base for every error that stops the server from starting or running."""


class BindError(DirServeError):
    pass


class BrowserOpenError(DirServeError):
    pass


class ListenerError(DirServeError):
    pass
