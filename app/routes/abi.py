from fastapi import APIRouter
from app.models.abi import AbiInput, AbiOutput
from app.models.interaction import ArgumentsRequest, ParseRequest
from app.services.abi import SAMPLE_ABI, AbiService
from app.services.arguments import ArgumentService
from app.services.presentation import format_type, summarize

router = APIRouter(
    prefix="/abi",
    tags=["abi"]
)

@router.get("/sample", status_code=200)
async def get_sample_abi():
    return {"abi": SAMPLE_ABI}

@router.post("/parse", status_code=200)
async def parse_abi(request: ParseRequest):
    if isinstance(request.abi, str):
        entries = AbiService.validate(request.abi)
    else:
        entries = AbiService.validate_value(request.abi)

    return {
        "entries": [entry.to_dict() for entry in entries],
        "summary": summarize(entries)
    }

@router.post("/format-type", status_code=200)
async def format_parameter_type(parameter: AbiInput | AbiOutput):
    return {"formatted": format_type(parameter)}

@router.post("/arguments", status_code=200)
async def format_arguments(request: ArgumentsRequest):
    return ArgumentService.format_arguments(request.entry, request.values)
