from typing import Any, Dict, Optional

import httpx


async def post_json(url: str,
                    payload: Dict[str, Any],
                    headers: Optional[Dict[str, str]] = None,
                    timeout: float = 10,
                    transport: Optional[httpx.AsyncBaseTransport] = None) -> Any:
    """POST a JSON body and return the decoded JSON response. Raises on non-2xx."""
    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        r = await client.post(url, json=payload, headers=headers)
        r.raise_for_status()
        return r.json()
