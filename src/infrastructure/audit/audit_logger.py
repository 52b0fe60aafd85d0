"""Fire-and-forget dispatcher for authorization audit events.

Guards call ``AuditLogger.record`` synchronously on the request path. The
call only schedules delivery; it never blocks on the sink and never raises,
so a broken sink can not change an authorization decision.

Scheduling:
    - Inside a running event loop: ``loop.create_task`` (a strong reference
      is kept until the task finishes, otherwise the loop may collect it).
    - Without a loop (sync callers, threadpool endpoints): a single
      background worker thread runs each delivery with ``asyncio.run``.

Delivery failures (a Failure result or an exception from the sink) are
logged as ``audit_dispatch_failed`` and dropped.

Reference:
    - src/domain/protocols/audit_protocol.py
"""

import asyncio
from concurrent.futures import Future, ThreadPoolExecutor
from threading import Lock

from src.core.result import Failure
from src.domain.events import AuthorizationEvaluated
from src.domain.protocols import AuditProtocol, LoggerProtocol


class AuditLogger:
    """Non-blocking front for an AuditProtocol sink.

    Attributes:
        _sink: Destination for events.
        _logger: Logger for dispatch failures.
        _enabled: When False, ``record`` is a no-op.
    """

    def __init__(
        self,
        sink: AuditProtocol,
        logger: LoggerProtocol,
        *,
        enabled: bool = True,
    ) -> None:
        self._sink = sink
        self._logger = logger
        self._enabled = enabled
        self._tasks: set[asyncio.Task[None]] = set()
        self._futures: set[Future[None]] = set()
        self._lock = Lock()
        self._executor: ThreadPoolExecutor | None = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    def record(self, event: AuthorizationEvaluated) -> None:
        """Schedule delivery of ``event`` to the sink.

        Returns immediately. Never raises.
        """
        if not self._enabled:
            return
        try:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                self._submit_to_worker(event)
                return
            task = loop.create_task(self._dispatch(event))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
        except Exception as e:
            self._logger.warning(
                "audit_dispatch_failed",
                event_id=str(event.event_id),
                error_type=type(e).__name__,
                error_message=str(e),
            )

    async def drain(self) -> None:
        """Wait for all scheduled deliveries to finish.

        Used at shutdown and in tests. Events recorded while draining are
        awaited too.
        """
        while True:
            tasks = [t for t in self._tasks if not t.done()]
            with self._lock:
                futures = [f for f in self._futures if not f.done()]
            if not tasks and not futures:
                return
            if tasks:
                await asyncio.gather(*tasks, return_exceptions=True)
            for future in futures:
                await asyncio.wrap_future(future)

    async def shutdown(self) -> None:
        """Drain pending deliveries and stop the worker thread."""
        await self.drain()
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)

    def _submit_to_worker(self, event: AuthorizationEvaluated) -> None:
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=1, thread_name_prefix="audit"
                )
            future = self._executor.submit(asyncio.run, self._dispatch(event))
            self._futures.add(future)
        future.add_done_callback(self._forget_future)

    def _forget_future(self, future: "Future[None]") -> None:
        with self._lock:
            self._futures.discard(future)

    async def _dispatch(self, event: AuthorizationEvaluated) -> None:
        try:
            result = await self._sink.record(event)
        except Exception as e:
            self._logger.warning(
                "audit_dispatch_failed",
                event_id=str(event.event_id),
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return
        match result:
            case Failure(error=error):
                self._logger.warning(
                    "audit_dispatch_failed",
                    event_id=str(event.event_id),
                    error_code=error.code.value,
                    error_message=error.message,
                )
