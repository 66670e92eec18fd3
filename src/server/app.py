from __future__ import annotations

import asyncio
import contextlib
import json
import logging
from dataclasses import asdict
from typing import Optional, Set

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from simulation import ControlEvent, Simulation, SimulationConfig, announce

logger = logging.getLogger(__name__)


class ControlAccepted(BaseModel):
    event: str
    pending: int
    fire_mode: bool


class SimulationManager:
    def __init__(self, config: Optional[SimulationConfig] = None) -> None:
        self.simulation = Simulation(config)
        self.announcement = announce()
        self.tick_interval = self.simulation.config.tick_interval
        self.clients: Set[WebSocket] = set()
        self._task: Optional[asyncio.Task] = None
        self._lock = asyncio.Lock()

    async def start(self) -> None:
        if self._task is None:
            logger.info("Simulation started: %s", self.announcement.to_json())
            self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        if self._task:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None

    async def _run(self) -> None:
        while not self.simulation.completed:
            async with self._lock:
                self.simulation.step()
                payload = self.current_state()
            await self.broadcast(payload)
            await asyncio.sleep(self.tick_interval)
        if self.simulation.fire_mode:
            await asyncio.sleep(self.simulation.config.fire_grace_period)

    async def broadcast(self, payload: dict) -> None:
        message = json.dumps(payload)
        disconnected: Set[WebSocket] = set()
        for client in set(self.clients):
            try:
                await client.send_text(message)
            except (WebSocketDisconnect, RuntimeError) as exc:
                logger.warning("Status stream client unavailable, dropping it: %r", exc)
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
        with contextlib.suppress(RuntimeError):
            await websocket.close()

    def current_state(self) -> dict:
        return {
            "state": self.simulation.state.value,
            "status": self.simulation.snapshot().to_dict(),
        }

    def post_control(self, name: str) -> ControlAccepted:
        event = ControlEvent.from_name(name)
        self.simulation.post(event)
        logger.info("Control event '%s' queued for the next tick", event.value)
        return ControlAccepted(
            event=event.value,
            pending=len(self.simulation.channel),
            fire_mode=self.simulation.fire_mode,
        )


def create_app(manager: SimulationManager) -> FastAPI:
    app = FastAPI(title="Elevator Fleet Simulation API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def on_startup() -> None:
        await manager.start()

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        await manager.stop()

    @app.get("/state")
    async def get_state() -> dict:
        return manager.current_state()

    @app.get("/announcement")
    async def get_announcement() -> dict:
        return asdict(manager.announcement)

    @app.post("/control/{name}", status_code=202, response_model=ControlAccepted)
    async def post_control(name: str) -> ControlAccepted:
        try:
            return manager.post_control(name)
        except ValueError as exc:
            raise HTTPException(status_code=404, detail=str(exc))

    @app.websocket("/ws/stream")
    async def websocket_endpoint(websocket: WebSocket) -> None:
        await manager.register(websocket)
        try:
            while True:
                await websocket.receive_text()
        except WebSocketDisconnect:
            await manager.unregister(websocket)

    return app


manager = SimulationManager()
app = create_app(manager)


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    uvicorn.run("server.app:app", host="0.0.0.0", port=8000, reload=False)
