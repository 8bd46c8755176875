from __future__ import annotations

import asyncio
import contextlib
import json
from typing import List, Optional, Sequence, Set

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from dispatch import Building, Clock, Event, SimulatedClock, UnknownElevatorError, UnknownFloorError
from selection import Direction, UnknownStrategyError


class StrategySelection(BaseModel):
    name: str


class HallCallRequest(BaseModel):
    direction: Direction


class FloorRequest(BaseModel):
    floor: int


class DispatchManager:
    def __init__(
        self,
        num_floors: int = 6,
        elevator_ids: Sequence[int] = (1, 2),
        clock: Optional[Clock] = None,
    ) -> None:
        self.building = Building(
            num_floors=num_floors,
            elevator_ids=list(elevator_ids),
            clock=clock or SimulatedClock(),
        )
        self.clients: Set[WebSocket] = set()
        self.recent_events: List[dict] = []
        self._lock = asyncio.Lock()
        self.building.events.on_event("*", self._record)

    def _record(self, event: Event) -> None:
        self.recent_events.append(event.as_dict())

    async def broadcast(self, payload: dict) -> None:
        message = json.dumps(payload)
        disconnected: Set[WebSocket] = set()
        for client in set(self.clients):
            try:
                await client.send_text(message)
            except WebSocketDisconnect:
                disconnected.add(client)
        for client in disconnected:
            await self.unregister(client)

    async def register(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.clients.add(websocket)
        await websocket.send_text(json.dumps(self.current_state()))

    async def unregister(self, websocket: WebSocket) -> None:
        if websocket in self.clients:
            self.clients.remove(websocket)
        with contextlib.suppress(Exception):
            await websocket.close()

    def current_state(self) -> dict:
        return {"building": self.building.snapshot()}

    async def _apply(self, action, *args) -> dict:
        async with self._lock:
            self.recent_events = []
            result = action(*args)
            state = self.current_state()
            state["events"] = self.recent_events
            if result is not None:
                state["result"] = result
        await self.broadcast(state)
        return state

    async def press_button(self, floor: int, direction: Direction) -> dict:
        return await self._apply(self.building.press_external_button, floor, direction)

    async def add_internal_request(self, elevator_id: int, floor: int) -> dict:
        return await self._apply(self.building.add_internal_request, elevator_id, floor)

    async def move_elevator(self, elevator_id: int, floor: int) -> dict:
        return await self._apply(self.building.move_elevator, elevator_id, floor)

    async def set_strategy(self, name: str) -> dict:
        return await self._apply(self.building.set_strategy, name)


manager = DispatchManager()
app = FastAPI(title="LiftDispatch API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/state")
async def get_state() -> dict:
    return manager.current_state()


@app.post("/floors/{floor}/press")
async def press_button(floor: int, request: HallCallRequest) -> dict:
    try:
        return await manager.press_button(floor, request.direction)
    except UnknownFloorError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


@app.post("/elevators/{elevator_id}/requests")
async def add_internal_request(elevator_id: int, request: FloorRequest) -> dict:
    try:
        return await manager.add_internal_request(elevator_id, request.floor)
    except (UnknownFloorError, UnknownElevatorError) as exc:
        raise HTTPException(status_code=404, detail=str(exc))


@app.post("/elevators/{elevator_id}/move")
async def move_elevator(elevator_id: int, request: FloorRequest) -> dict:
    try:
        return await manager.move_elevator(elevator_id, request.floor)
    except (UnknownFloorError, UnknownElevatorError) as exc:
        raise HTTPException(status_code=404, detail=str(exc))


@app.post("/strategy")
async def set_strategy(selection: StrategySelection) -> dict:
    try:
        return await manager.set_strategy(selection.name)
    except UnknownStrategyError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@app.websocket("/ws/stream")
async def websocket_endpoint(websocket: WebSocket) -> None:
    await manager.register(websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        await manager.unregister(websocket)


def main() -> None:
    import uvicorn

    uvicorn.run("server.app:app", host="0.0.0.0", port=8000, reload=False)


if __name__ == "__main__":
    main()
