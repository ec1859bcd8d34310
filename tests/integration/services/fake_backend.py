"""In-memory console REST backend for end-to-end controller tests.

Speaks the same dialect as the real service: ``/api/{resource}`` CRUD
with the ``{success, data, message}`` envelope, except ``/api/users``
which lists as a bare JSON array. Tasks are stored in the server status
vocabulary (``pending``, ``in-progress``, ``completed``).
"""

import itertools
from typing import Any

from fastapi import APIRouter, Body, Depends, FastAPI, Header, HTTPException, status
from fastapi.responses import JSONResponse

RESOURCES = ("clients", "organizations", "tasks", "users")


class FakeConsoleBackend:
    """Holds the store and the switches tests flip to simulate misbehaviour."""

    def __init__(self, token: str = "test-token", seed: dict[str, list[dict]] | None = None):
        self.token = token
        self.store: dict[str, dict[str, dict[str, Any]]] = {name: {} for name in RESOURCES}
        self.requests: list[tuple[str, str]] = []
        self.stale_status_on_update = False
        self.fail_deletes = False
        self._ids = itertools.count(1)
        for resource, rows in (seed or {}).items():
            for row in rows:
                self.store[resource][str(row["id"])] = dict(row)
        self.app = self._build_app()

    def _bucket(self, resource: str) -> dict[str, dict[str, Any]]:
        if resource not in self.store:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown resource '{resource}'")
        return self.store[resource]

    def _require_token(self, authorization: str | None = Header(None)) -> None:
        if authorization != f"Bearer {self.token}":
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    def _build_app(self) -> FastAPI:
        router = APIRouter(prefix="/api", dependencies=[Depends(self._require_token)])

        @router.get("/{resource}")
        async def list_records(resource: str) -> Any:
            self.requests.append(("GET", resource))
            rows = list(self._bucket(resource).values())
            if resource == "users":
                return rows
            return {"success": True, "data": rows, "count": len(rows)}

        @router.get("/{resource}/{record_id}")
        async def get_record(resource: str, record_id: str) -> dict:
            row = self._bucket(resource).get(record_id)
            if row is None:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
            return {"success": True, "data": row}

        @router.post("/{resource}", status_code=status.HTTP_201_CREATED)
        async def create_record(resource: str, payload: dict[str, Any] = Body(...)) -> dict:
            self.requests.append(("POST", resource))
            bucket = self._bucket(resource)
            record_id = str(next(self._ids))
            payload.pop("password", None)
            row = {**payload, "id": record_id, "createdAt": "2024-01-01T00:00:00Z"}
            bucket[record_id] = row
            return {"success": True, "data": row}

        @router.put("/{resource}/{record_id}")
        async def update_record(resource: str, record_id: str, payload: dict[str, Any] = Body(...)) -> Any:
            self.requests.append(("PUT", f"{resource}/{record_id}"))
            bucket = self._bucket(resource)
            previous = bucket.get(record_id)
            if previous is None:
                return JSONResponse(
                    status_code=status.HTTP_404_NOT_FOUND,
                    content={"success": False, "message": f"{resource} {record_id} not found"},
                )
            payload.pop("password", None)
            row = {**previous, **payload, "id": record_id}
            bucket[record_id] = row
            echoed = dict(row)
            if self.stale_status_on_update:
                echoed["status"] = previous.get("status")
            return {"success": True, "data": echoed}

        @router.delete("/{resource}/{record_id}")
        async def delete_record(resource: str, record_id: str) -> Any:
            self.requests.append(("DELETE", f"{resource}/{record_id}"))
            bucket = self._bucket(resource)
            if self.fail_deletes:
                return JSONResponse(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    content={"success": False, "message": "Internal Server Error"},
                )
            if bucket.pop(record_id, None) is None:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
            return {"success": True, "message": "Deleted"}

        app = FastAPI(title="Fake console backend")
        app.include_router(router)
        return app
