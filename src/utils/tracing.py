import logging
import time
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

trace_context: ContextVar[Optional['TraceSpan']] = ContextVar(
    'trace_context', default=None
)

logger = logging.getLogger(__name__)

_enabled = False


def configure_tracing(enabled: bool) -> None:
    '''Turn span timing logs on or off for the whole process.'''
    global _enabled
    _enabled = enabled


@dataclass
class TraceSpan:
    '''A timed unit of work, nested under the span active when it started.'''

    name: str
    start_time: float = field(default_factory=time.perf_counter)
    end_time: Optional[float] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    parent: Optional['TraceSpan'] = None
    children: list['TraceSpan'] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def duration(self) -> Optional[float]:
        return self.end_time - self.start_time if self.end_time else None

    @property
    def depth(self) -> int:
        return 0 if self.parent is None else self.parent.depth + 1

    def finish(self) -> None:
        self.end_time = time.perf_counter()
        if not _enabled:
            return

        duration_ms = (self.duration or 0) * 1000
        metadata_str = ', '.join(f'{k}={v}' for k, v in self.metadata.items())
        indent = '  ' * self.depth
        status = f' FAILED ({self.error})' if self.error else ''
        logger.debug(
            f'{indent}{self.name}: {duration_ms:.2f}ms{status} [{metadata_str}]'
        )


@contextmanager
def trace_span(
    name: str, metadata: Optional[Dict[str, Any]] = None
) -> Iterator[TraceSpan]:
    '''Time a block of work and attach it to the current span tree.

    Example:
        with trace_span('achievements.resolve', {'profile_id': profile.id}):
            unlocked = orchestrator.resolve_new_unlocks(profile)
    '''
    parent = trace_context.get()
    span = TraceSpan(name=name, metadata=metadata or {}, parent=parent)
    if parent:
        parent.children.append(span)

    token = trace_context.set(span)
    try:
        yield span
    except Exception as e:
        span.error = type(e).__name__
        raise
    finally:
        span.finish()
        trace_context.reset(token)


def add_span_metadata(key: str, value: Any) -> None:
    current = trace_context.get()
    if current:
        current.metadata[key] = value
