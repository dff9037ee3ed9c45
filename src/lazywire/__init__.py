from lazywire.capabilities import Bar, Barable, Foo, Fooable
from lazywire.consumer import LazyConsumer
from lazywire.demo import Demo, DemoRunner
from lazywire.exceptions import ConstructionError, LazyWireError, OperationError
from lazywire.providers import CachedProvider, Provider, cached, provide
from lazywire.settings import DemoSettings

__all__ = [
    "Bar",
    "Barable",
    "CachedProvider",
    "ConstructionError",
    "Demo",
    "DemoRunner",
    "DemoSettings",
    "Foo",
    "Fooable",
    "LazyConsumer",
    "LazyWireError",
    "OperationError",
    "Provider",
    "cached",
    "provide",
]
