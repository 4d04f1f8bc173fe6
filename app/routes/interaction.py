from fastapi import APIRouter, Depends
from app.models.interaction import CallRequest
from app.services.interaction import InteractionService
from app.services.provider import ContractCallProvider, Web3Provider

router = APIRouter(
    prefix="/contracts",
    tags=["contracts"]
)

def get_provider() -> ContractCallProvider:
    return Web3Provider()

# sync so that blocking RPC calls run in the threadpool
@router.post("/call", status_code=200)
def call_contract(request: CallRequest, provider: ContractCallProvider = Depends(get_provider)):
    return InteractionService.execute(provider, request)
