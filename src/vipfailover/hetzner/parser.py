"""Decoding of Robot failover API responses."""

import json

from pydantic import ValidationError

from vipfailover.exceptions import MalformedResponseError
from vipfailover.models.failover import APIErrorRecord, FailoverRecord
from vipfailover.utils.logger import get_logger

logger = get_logger(__name__)


def parse_failover_response(body: str) -> FailoverRecord | APIErrorRecord:
    """
    Decode a failover API response body.

    Returns:
        APIErrorRecord if the provider reported an error, FailoverRecord
        otherwise.

    Raises:
        MalformedResponseError: Body is not a JSON object, a field failed to
            validate, or it matches neither known shape.
    """
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, TypeError) as e:
        raise MalformedResponseError(f"Response is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )

    if payload.get("error") is not None:
        try:
            error = APIErrorRecord.model_validate(payload["error"])
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid error response: {e}") from e
        logger.error(
            "There was an error accessing the Hetzner API! "
            f"status: {error.status} code: {error.code} message: {error.message}"
        )
        return error

    if payload.get("failover") is not None:
        try:
            failover = FailoverRecord.model_validate(payload["failover"])
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid failover response: {e}") from e
        logger.info(
            f"Result of the failover query was: failover-ip={failover.ip} "
            f"netmask={failover.netmask} server_ip={failover.server_ip} "
            f"server_number={failover.server_number} "
            f"active_server_ip={failover.active_server_ip}"
        )
        return failover

    raise MalformedResponseError("Response matched neither known shape")
