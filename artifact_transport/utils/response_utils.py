"""
Response utilities for classifying transfer outcomes.

Each transfer kind maps HTTP status codes onto the transport exception
hierarchy in exactly one function, so the mapping can be revisited in a
single place.
"""

import logging

from ..exceptions import AuthorizationError, ResourceDoesNotExistError, TransferFailedError
from .constants import GET_NOT_FOUND_CODES, HTTP_FORBIDDEN, HTTP_NOT_FOUND, HTTP_OK, PUT_SUCCESS_CODES


def classify_get_status(status_code: int, url: str) -> None:
    """
    Check the status of a fetch.

    Args:
        status_code: HTTP status code of the GET response
        url: URL that was fetched

    Raises:
        ResourceDoesNotExistError: For 404 and 410
        TransferFailedError: For any other status of 400 or above
    """
    if status_code in GET_NOT_FOUND_CODES:
        raise ResourceDoesNotExistError(f"Unable to locate resource in repository: {url}")
    if status_code >= 400:
        raise TransferFailedError(f"Error transferring file: {url}. Return code is: {status_code}")


def classify_put_status(status_code: int, url: str) -> None:
    """
    Check the status of an upload.

    Args:
        status_code: HTTP status code of the PUT response
        url: URL that was uploaded to

    Raises:
        AuthorizationError: For 403
        ResourceDoesNotExistError: For 404
        TransferFailedError: For any other code outside 200, 201, 202 and 204
    """
    if status_code in PUT_SUCCESS_CODES:
        return
    if status_code == HTTP_FORBIDDEN:
        raise AuthorizationError(f"Access denied to: {url}")
    if status_code == HTTP_NOT_FOUND:
        raise ResourceDoesNotExistError(f"File: {url} does not exist")
    raise TransferFailedError(f"Failed to transfer file: {url}. Return code is: {status_code}")


def classify_head_status(status_code: int, url: str) -> bool:
    """
    Turn the status of an existence check into a yes/no answer.

    Any status other than 200, 403 and 404 is reported as "does not exist",
    so a server error is indistinguishable from an absent resource.

    Args:
        status_code: HTTP status code of the HEAD response
        url: URL that was checked

    Returns:
        True for 200, False otherwise

    Raises:
        AuthorizationError: For 403
    """
    if status_code == HTTP_OK:
        return True
    if status_code == HTTP_FORBIDDEN:
        raise AuthorizationError(f"Access denied to: {url}")
    if status_code != HTTP_NOT_FOUND:
        logging.debug("Treating status %d for %s as missing resource", status_code, url)
    return False


__all__ = ["classify_get_status", "classify_put_status", "classify_head_status"]
