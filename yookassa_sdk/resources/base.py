"""
Request/response pipeline shared by resource handlers.
"""

import copy
import logging
import time
from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import ValidationError

from ..classifier import classify_error
from ..client import Requester
from ..exceptions import ApiError, DecodeError, TransportError
from ..metrics import outcome_of, record_request
from ..models import ListFilter, Resource
from ..utils.body import MAX_RESPONSE_BODY_BYTES, read_limited
from ..utils.idempotency import make_idempotency_key

logger = logging.getLogger("yookassa_sdk.resources")

R = TypeVar("R", bound=Resource)
H = TypeVar("H", bound="ResourceHandler")

SUCCESS_STATUS = 200


class ResourceHandler:
    """
    Base class for resource handlers.

    A handler holds no mutable state after construction and can be shared
    between threads. ``with_idempotency_key`` returns a copy pinned to one key,
    which is the way to retry the same logical write.
    """

    endpoint = ""

    def __init__(self, client: Requester, idempotency_key: Optional[str] = None):
        self.client = client
        self.idempotency_key = (
            make_idempotency_key(idempotency_key) if idempotency_key else None
        )

    def with_idempotency_key(self: H, idempotency_key: str) -> H:
        """
        Return a copy of this handler that sends ``idempotency_key`` on every write.

        Args:
            idempotency_key: Key reused across calls from the returned handler

        Raises:
            ValueError: If the key is too long
        """
        pinned = copy.copy(self)
        pinned.idempotency_key = make_idempotency_key(idempotency_key)
        return pinned

    def _request(
        self,
        operation: str,
        method: str,
        endpoint: str,
        model: Type[R],
        body: Optional[bytes] = None,
        params: Optional[Mapping[str, Any]] = None,
        idempotency_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> R:
        """
        Perform one API call and decode the result into ``model``.

        The response is closed on every exit path, and the call is recorded
        in metrics exactly once, with its outcome.

        Raises:
            TransportError: Request could not be sent or its body not read
                before the deadline (propagated unchanged)
            ApiError: Status other than 200
            DecodeError: Success body does not fit ``model`` or exceeds 10 MiB
        """
        start = time.perf_counter()
        status_code = None
        error = None

        try:
            response = self.client.make_request(
                method,
                endpoint,
                body=body,
                params=params,
                idempotency_key=idempotency_key or self.idempotency_key,
                timeout=timeout,
            )
            status_code = response.status_code

            try:
                if status_code != SUCCESS_STATUS:
                    raise classify_error(
                        response.body,
                        status_code=status_code,
                        deadline=response.deadline,
                    )

                raw = read_limited(
                    response.body, MAX_RESPONSE_BODY_BYTES, deadline=response.deadline
                )
            finally:
                response.close()

            return self._decode(model, raw)
        except TransportError as e:
            error = e
            logger.warning(
                "%s failed to reach API: %s", operation, e, extra={"operation": operation}
            )
            raise
        except ApiError as e:
            error = e
            logger.info(
                "%s rejected: %s",
                operation,
                e.code,
                extra={"operation": operation, "status_code": status_code},
            )
            raise
        except Exception as e:
            error = e
            raise
        finally:
            record_request(operation, status_code, outcome_of(error), time.perf_counter() - start)

    @staticmethod
    def _decode(model: Type[R], raw: bytes) -> R:
        try:
            return model.model_validate_json(raw)
        except ValidationError as e:
            raise DecodeError(f"unable to decode {model.__name__} response: {e}") from e

    @staticmethod
    def _params(filter: Optional[ListFilter]) -> Optional[Mapping[str, Any]]:
        if filter is None:
            return None
        return filter.to_params() or None
