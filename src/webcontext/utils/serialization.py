import base64
import logging
import pickle

from typing import Any

from webcontext.utils.errors import DeserializationError


logger = logging.getLogger(__name__)


class SerializationHelper:
    """Turns arbitrary picklable objects into base64 text and back.

    Used wherever an object has to travel through a slot that only holds
    strings, such as request attributes or Redis session hashes.
    """

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL):
        self._protocol = protocol

    def serialize_to_base64(self, value: Any) -> str:
        """Serializes a value to urlsafe base64 text.

        Unpicklable values raise the error produced by `pickle`.
        """
        data = pickle.dumps(value, protocol=self._protocol)
        return base64.urlsafe_b64encode(data).decode('ascii')

    def deserialize_from_base64(self, text: str) -> Any:
        """Restores a value produced by `serialize_to_base64`.

        Raises:
            DeserializationError: If the text is not valid base64 pickle data.
        """
        try:
            data = base64.urlsafe_b64decode(text.encode('ascii'))
            return pickle.loads(data)  # noqa: S301
        except Exception as e:
            logger.debug('Failed to deserialize base64 payload: %s', e)
            raise DeserializationError(
                f'Cannot deserialize value: {e}'
            ) from e
