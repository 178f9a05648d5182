from fastapi import APIRouter, Depends

from src.schemas import DripFeedResponse
from src.services import DripFeedService
from src.utils.dependencies import get_service, verify_cron_secret

router = APIRouter(prefix="/cron", tags=["cron"])

DripFeedServiceDep = Depends(get_service(DripFeedService))


@router.get("/drip-feed", response_model=DripFeedResponse, dependencies=[Depends(verify_cron_secret)])
def run_drip_feed(
    service: DripFeedService = DripFeedServiceDep,
):
    return service.run()
