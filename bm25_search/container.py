import logging
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from .config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Container:
    _factories: dict[type, Callable[[], Any]] = field(default_factory=dict)
    _singletons: dict[type, Any] = field(default_factory=dict)
    _singleton_flags: set[type] = field(default_factory=set)

    def register(
        self, interface: type[T], factory: Callable[[], T], singleton: bool = False
    ) -> None:
        """Register factory for interface.

        Args:
            interface: Interface type.
            factory: Factory function.
            singleton: Whether to cache instance.
        """
        self._factories[interface] = factory
        if singleton:
            self._singleton_flags.add(interface)
        else:
            self._singleton_flags.discard(interface)
        self._singletons.pop(interface, None)

    def resolve(self, interface: type[T]) -> T:
        if interface in self._singletons:
            return self._singletons[interface]

        if interface not in self._factories:
            raise KeyError(f"No factory registered for {interface}")

        instance = self._factories[interface]()

        if interface in self._singleton_flags:
            self._singletons[interface] = instance

        return instance

    def reset(self) -> None:
        """Reset singletons (for testing)."""
        self._singletons.clear()


container = Container()


def configure_container(settings: Settings, target: Container | None = None) -> Container:
    """Configure container with all dependencies.

    Args:
        settings: Application settings.
        target: Container to configure. Defaults to the module container.

    Returns:
        Configured container.
    """
    from .core.protocols.loader import ContentLoaderProtocol
    from .core.protocols.ranker import RankerProtocol
    from .core.services.chunk_service import Chunker
    from .core.services.result_selector import ResultSelector
    from .core.services.search_service import SearchService
    from .core.services.workspace_guard import WorkspaceGuard
    from .infrastructure.document_loaders.text_loader import TextLoader
    from .infrastructure.file_system.enumerator import FileEnumerator
    from .infrastructure.rankers.okapi_bm25 import OkapiBM25Ranker
    from .presentation.tool import BM25SearchTool

    c = target if target is not None else container

    c.register(
        WorkspaceGuard,
        lambda: WorkspaceGuard(
            target_dir=settings.target_dir,
            directories=settings.workspace_directories,
        ),
        singleton=True,
    )

    c.register(
        ContentLoaderProtocol,
        lambda: TextLoader(
            encoding=settings.file_encoding,
            errors=settings.file_encoding_errors,
        ),
        singleton=True,
    )

    c.register(
        RankerProtocol,
        lambda: OkapiBM25Ranker(k1=settings.bm25_k1, b=settings.bm25_b),
        singleton=True,
    )

    c.register(FileEnumerator, FileEnumerator, singleton=True)

    c.register(
        Chunker,
        lambda: Chunker(loader=c.resolve(ContentLoaderProtocol)),
        singleton=True,
    )

    c.register(
        ResultSelector,
        lambda: ResultSelector(max_results=settings.max_results),
        singleton=True,
    )

    c.register(
        SearchService,
        lambda: SearchService(
            guard=c.resolve(WorkspaceGuard),
            enumerator=c.resolve(FileEnumerator),
            chunker=c.resolve(Chunker),
            ranker=c.resolve(RankerProtocol),
            selector=c.resolve(ResultSelector),
        ),
        singleton=True,
    )

    c.register(
        BM25SearchTool,
        lambda: BM25SearchTool(
            search_service=c.resolve(SearchService),
            guard=c.resolve(WorkspaceGuard),
            default_chunk_size=settings.chunk_size,
            default_overlap=settings.chunk_overlap,
        ),
        singleton=True,
    )

    logger.info("Container configured")
    return c
