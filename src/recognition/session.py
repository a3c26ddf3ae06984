"""Recognition session holding the observations of the latest OCR run."""

import asyncio
import logging
from collections.abc import Callable

from overlay.schemas import RecognizedObservation

from .engine.ocr_engine import OCREngine
from .exceptions import RecognitionError

logger = logging.getLogger(__name__)

Listener = Callable[[tuple[RecognizedObservation, ...]], None]


class RecognitionSession:
    """Runs OCR on captured images and keeps the latest results.

    The held observations are replaced as a whole on every ``recognize`` call,
    never merged. Subscribers are called with a snapshot each time the held
    observations change.

    Attributes:
        engine: OCR engine used for recognition.
    """

    def __init__(self, engine: OCREngine):
        """Initializes the session with an empty observation list."""
        self.engine = engine
        self._observations: list[RecognizedObservation] = []
        self._listeners: list[Listener] = []
        # One recognition in flight per session and event loop
        self._lock: asyncio.Lock | None = None
        self._lock_loop: asyncio.AbstractEventLoop | None = None

    def current_observations(self) -> tuple[RecognizedObservation, ...]:
        """Returns a snapshot of the held observations."""
        return tuple(self._observations)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Registers ``listener`` for changes and returns a function removing it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def clear(self):
        """Drops all held observations."""
        self._replace([])

    async def recognize(self, image_bytes: bytes) -> tuple[RecognizedObservation, ...]:
        """Runs OCR on ``image_bytes`` and replaces the held observations.

        Previous observations are cleared before the engine runs. The engine
        runs in a worker thread while the calling task waits.

        Returns:
            The new observations, in the order the engine reported them.

        Raises:
            RecognitionError: If recognition fails. The session is left empty.
        """
        async with self._loop_lock():
            self._replace([])

            try:
                results = await asyncio.to_thread(self.engine.recognize, image_bytes)
            except RecognitionError as exc:
                logger.warning("Recognition failed: %s", exc)
                raise
            except Exception as exc:
                logger.warning("OCR engine raised an unexpected error: %s", exc)
                raise RecognitionError(f"OCR engine failed: {exc}") from exc

            self._replace(list(results))
            logger.info("Recognized %d text regions.", len(self._observations))
            return self.current_observations()

    def _loop_lock(self) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    def _replace(self, observations: list[RecognizedObservation]):
        if not observations and not self._observations:
            return
        self._observations = observations
        snapshot = tuple(observations)
        for listener in list(self._listeners):
            listener(snapshot)
