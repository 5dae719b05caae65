import json
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, Field  # type: ignore

QueryParams = Union[Dict[str, Any], Sequence[Tuple[str, Any]]]


class HTTPRequest(BaseModel):
    """HTTP request
    Args:
        url: The URL of the request
        method: The HTTP method to use
        headers: The headers to send with the request
        body: The body of the request
        query_params: The query parameters to use
    """
    url: str = Field(alias="uri")
    method: str = Field(default="GET")
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Union[Dict[str, Any], List[Any], bytes, str, None] = None
    query_params: Optional[QueryParams] = Field(default=None, alias="query")

    model_config = {"populate_by_name": True}

    def to_json(self) -> str:
        """
        Convert request to a JSON string.
        Bytes are decoded as UTF-8.
        """
        data = self.model_dump()

        if isinstance(self.body, bytes):
            data["body"] = self.body.decode("utf-8", errors="replace")

        return json.dumps(data, indent=2, default=str)
