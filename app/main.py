from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config.settings import configure_logging, get_settings
from app.exceptions import (
    AbiSchemaError,
    AbiSyntaxError,
    ArgumentError,
    ContractCallError,
    UnsupportedChainError,
)
from app.routes import abi
from app.routes import interaction

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(
    title="ABI Reader API",
    description="API to parse, explore and call smart contract ABIs",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],  # Allows all methods
    allow_headers=["*"],  # Allows all headers
)

@app.exception_handler(AbiSyntaxError)
async def abi_syntax_error_handler(request: Request, exc: AbiSyntaxError):
    return JSONResponse(status_code=400, content=exc.to_dict())

@app.exception_handler(AbiSchemaError)
async def abi_schema_error_handler(request: Request, exc: AbiSchemaError):
    return JSONResponse(status_code=422, content=exc.to_dict())

@app.exception_handler(ArgumentError)
async def argument_error_handler(request: Request, exc: ArgumentError):
    return JSONResponse(
        status_code=422,
        content={"message": exc.message, "errors": exc.errors, "missing": exc.missing}
    )

@app.exception_handler(UnsupportedChainError)
async def unsupported_chain_handler(request: Request, exc: UnsupportedChainError):
    return JSONResponse(status_code=400, content={"message": str(exc)})

@app.exception_handler(ContractCallError)
async def contract_call_error_handler(request: Request, exc: ContractCallError):
    return JSONResponse(status_code=502, content={"message": str(exc)})

@app.get("/")
def read_root():
    return {"status": "running"}

# include routes
app.include_router(abi.router)
app.include_router(interaction.router)
