from fastapi import APIRouter, Depends

from src.schemas import CampaignAnalyzeRequest, CampaignDeployRequest, CampaignDeployResponse, TopicAnalysisResult
from src.services import DeployService, KeywordService
from src.utils.dependencies import get_service

router = APIRouter(prefix="/campaign", tags=["campaign"])

KeywordServiceDep = Depends(get_service(KeywordService))
DeployServiceDep = Depends(get_service(DeployService))


@router.post("/analyze", response_model=TopicAnalysisResult)
def analyze_campaign(
    request: CampaignAnalyzeRequest,
    service: KeywordService = KeywordServiceDep,
):
    return service.analyze(request)


@router.post("/deploy", response_model=CampaignDeployResponse)
def deploy_campaign(
    request: CampaignDeployRequest,
    service: DeployService = DeployServiceDep,
):
    return service.deploy_campaign(request)
