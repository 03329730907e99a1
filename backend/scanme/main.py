import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.datastructures import UploadFile

from scanme.ai import GeminiClient
from scanme.core import Settings, HealthResponse, ErrorResponse, AnalysisResult, configure_logging
from scanme.errors import ClientInputError, FileTooLarge, NoFileUploaded
from scanme.models import UploadedFile, media_type_for
from scanme.services.analysis import AnalysisService

logger = logging.getLogger(__name__)

# room for multipart boundaries and part headers on top of the file itself
MULTIPART_OVERHEAD_BYTES = 64 * 1024

UPLOAD_REQUEST_BODY = {
    "content": {
        "multipart/form-data": {
            "schema": {
                "type": "object",
                "properties": {"resume": {"type": "string", "format": "binary"}},
            }
        }
    }
}


def client_input_error_handler(request: Request, exc: ClientInputError):
    body = ErrorResponse(error=exc.message)
    if isinstance(exc, FileTooLarge):
        body.message = f"Maximum upload size is {exc.limit_bytes // (1024 * 1024)} MiB"
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(exclude_none=True))


def check_content_length(request: Request, max_bytes: int):
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > max_bytes + MULTIPART_OVERHEAD_BYTES:
        raise FileTooLarge(max_bytes)


async def read_upload(resume, max_bytes: int) -> UploadedFile:
    # a plain form value named "resume" is not an upload
    if not isinstance(resume, UploadFile):
        raise NoFileUploaded()

    # the part is already spooled by the form parser; only limit+1 bytes are copied out
    contents = await resume.read(max_bytes + 1)
    await resume.close()
    if len(contents) > max_bytes:
        raise FileTooLarge(max_bytes)

    return UploadedFile(
        data=contents,
        media_type=media_type_for(resume.content_type),
        original_name=resume.filename or "",
    )


def create_app(settings: Optional[Settings] = None, service: Optional[AnalysisService] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    if service is None:
        service = AnalysisService(GeminiClient(settings.gemini_api_key, settings.gemini_model), settings)

    app = FastAPI(title="ScanMe Resume Analyzer", version="0.1.0")
    app.state.settings = settings
    app.state.analysis = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ClientInputError, client_input_error_handler)

    @app.get("/health", response_model=HealthResponse, tags=["default"])
    def health():
        return HealthResponse().model_dump()

    @app.post(
        "/analyze",
        response_model=None,
        tags=["default"],
        responses={
            200: {"model": AnalysisResult},
            400: {"model": ErrorResponse},
            413: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
        },
        openapi_extra={"requestBody": UPLOAD_REQUEST_BODY},
    )
    async def analyze(request: Request):
        max_bytes = request.app.state.settings.max_file_bytes
        check_content_length(request, max_bytes)
        form = await request.form()
        upload = await read_upload(form.get("resume"), max_bytes)
        try:
            return await request.app.state.analysis.analyze(upload)
        except ClientInputError:
            raise
        except Exception as e:
            logger.error(f"Error: {e}")
            return JSONResponse(
                status_code=500,
                content=ErrorResponse(error="Analysis failed", message=str(e)).model_dump(),
            )

    return app


app = create_app()


def run():
    import uvicorn

    settings = app.state.settings
    logger.info(f"Server running on http://localhost:{settings.port}")
    logger.info(f"Health check: http://localhost:{settings.port}/health")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
