from fastapi import APIRouter, Depends

from caradvice.entrypoints.http.dependencies import get_vehicle_store
from caradvice.ports.vehicle_store import VehicleStore

router = APIRouter(tags=["Health"])


@router.get("/health", summary="Liveness probe")
def health(store: VehicleStore = Depends(get_vehicle_store)) -> dict[str, object]:
    return {"status": "ok", "vehicles": len(store)}
