from fastapi import APIRouter, Depends

from src.schemas import SiteContent, SiteContentRequest
from src.services import ContentService
from src.utils.dependencies import get_service

router = APIRouter(prefix="/content", tags=["content"])

ContentServiceDep = Depends(get_service(ContentService))


@router.post("/generate", response_model=SiteContent)
def generate_content(
    request: SiteContentRequest,
    service: ContentService = ContentServiceDep,
):
    return service.generate(request)
