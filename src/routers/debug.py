from fastapi import APIRouter, Depends

from src.schemas import DebugDbOut
from src.services import DashboardService
from src.utils.dependencies import get_service

router = APIRouter(tags=["debug"])

DashboardServiceDep = Depends(get_service(DashboardService))


@router.get("/debug-db", response_model=DebugDbOut)
def read_debug_db(
    service: DashboardService = DashboardServiceDep,
):
    return service.get_debug_snapshot()
