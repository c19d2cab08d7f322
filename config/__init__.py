from .properties import settings

__all__ = ["settings"]
