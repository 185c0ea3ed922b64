"""
Serialization of listings, errors and folder results to the JSON wire format.

Nothing in here raises: a payload that cannot be serialized is replaced
by a generic error message.
"""
import json
from typing import Any, Dict

from ..models import DirectoryListing, ErrorResponse, FolderCreationResult

PARSE_ERROR_MESSAGE = "Cannot parse content"


def encode(payload: Dict[str, Any]) -> str:
    """
    Serialize a payload dict to JSON text.

    Args:
        payload: Wire message as a dict

    Returns:
        JSON string; a "sendError" message if the payload is not serializable
    """
    try:
        return json.dumps(payload)
    except (TypeError, ValueError) as e:
        print(f"Error serializing response: {e}")
        return json.dumps(ErrorResponse(PARSE_ERROR_MESSAGE).to_dict())


def encode_listing(listing: DirectoryListing) -> str:
    return encode(listing.to_dict())


def encode_error(message: str) -> str:
    return encode(ErrorResponse(message).to_dict())


def encode_folder_result(result: FolderCreationResult) -> str:
    return encode(result.to_dict())
