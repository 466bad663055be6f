from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Health"])


# Liveness only: never touches the upstream instance
@router.get("/health", response_class=PlainTextResponse)
def health():
    return "OK"
