from .fake_helper import FakeHelper

__all__ = ["FakeHelper"]
