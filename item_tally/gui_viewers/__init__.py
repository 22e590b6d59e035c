# Tests import/monkeypatch these off `item_tally.gui_viewers`

__all__ = ["App", "main"]


# Lazily expose App to avoid importing tkinter during package import
def __getattr__(name):
    if name in ("App", "main"):
        from . import app  # imported only when actually accessed
        return getattr(app, name)
    raise AttributeError(name)
