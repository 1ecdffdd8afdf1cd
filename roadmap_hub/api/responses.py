from __future__ import annotations

from fastapi import Request


def request_meta(request: Request) -> dict[str, object]:
    return {"request_id": getattr(request.state, "request_id", None)}


def success_payload(request: Request, *, data: object) -> dict[str, object]:
    return {"data": data, "meta": request_meta(request)}
