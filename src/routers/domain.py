from fastapi import APIRouter, Depends

from src.schemas import (
    DomainCheckAllRequest,
    DomainCheckRequest,
    DomainCheckResult,
    DomainGenerateRequest,
    DomainGenerateResponse,
)
from src.services import DomainService
from src.utils.dependencies import get_service

router = APIRouter(prefix="/domain", tags=["domain"])

DomainServiceDep = Depends(get_service(DomainService))


@router.post("/generate", response_model=DomainGenerateResponse)
def generate_domains(
    request: DomainGenerateRequest,
    service: DomainService = DomainServiceDep,
):
    return service.generate(request)


@router.post("/check", response_model=DomainCheckResult)
def check_domain(
    request: DomainCheckRequest,
    service: DomainService = DomainServiceDep,
):
    return service.check(request)


@router.post("/check-all", response_model=list[DomainCheckResult])
def check_domains(
    request: DomainCheckAllRequest,
    service: DomainService = DomainServiceDep,
):
    return service.check_all(request)
