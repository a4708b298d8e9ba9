# seerai/core/dependencies.py
from fastapi import Request

from seerai.services.llm.llm_services import LLMGateway


def get_llm_gateway(request: Request) -> LLMGateway:
    """Dependency to provide the process-wide LLM gateway."""
    return request.app.state.llm_gateway
