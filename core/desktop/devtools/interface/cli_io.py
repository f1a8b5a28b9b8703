import json
import sys
from typing import Any, Dict, Optional


def structured_response(
    command: str,
    *,
    message: str = "",
    payload: Optional[Dict[str, Any]] = None,
    exit_code: int = 0,
    as_json: bool = False,
) -> int:
    """Print a command outcome, human-readable or as a JSON body (--json)."""
    if as_json:
        body: Dict[str, Any] = {
            "command": command,
            "status": "OK" if exit_code == 0 else "ERROR",
            "message": message,
            "payload": payload or {},
        }
        print(json.dumps(body, ensure_ascii=False, indent=2))
    elif message:
        print(message, file=sys.stdout if exit_code == 0 else sys.stderr)
    return exit_code


def structured_error(command: str, message: str, *, exit_code: int = 1, as_json: bool = False) -> int:
    return structured_response(command, message=message, exit_code=exit_code, as_json=as_json)


__all__ = ["structured_response", "structured_error"]
