"""
Hugging Face Inference API profile (inference-hosting provider).

The model is an instruct chat model, so the prompt is wrapped in the
Llama 3 chat template and only the assistant continuation is requested.

Response:
    [{"generated_text": "..."}]
    A loading or unknown model may answer {"error": "..."}.
"""

from typing import Any, Optional

from .http import ProviderProfile
from .prompts import step_by_step_prompt
from .types import ProviderKind, ProviderRequest

HF_INFERENCE_URL = "https://api-inference.huggingface.co/models"
DEFAULT_HF_MODEL = "meta-llama/Meta-Llama-3-8B-Instruct"
HF_LABEL = "### Hugging Face Solution"
MAX_NEW_TOKENS = 512


def llama3_chat_prompt(question: str) -> str:
    return (
        "<|begin_of_text|><|start_header_id|>user<|end_header_id|>\n\n"
        f"{step_by_step_prompt(question)}<|eot_id|>"
        "<|start_header_id|>assistant<|end_header_id|>\n\n"
    )


def _extract_error(data: Any) -> Optional[str]:
    if isinstance(data, dict) and data.get("error") is not None:
        return str(data["error"])
    return None


def _extract_text(data: Any, question: str) -> Optional[str]:
    generated = data[0]["generated_text"]
    if not isinstance(generated, str):
        return None

    # Some deployments ignore return_full_text and echo the prompt back
    _, sep, tail = generated.partition(llama3_chat_prompt(question))
    answer = (tail if sep and tail.strip() else generated).strip()
    if not answer:
        return None
    return f"{HF_LABEL}\n{answer}"


def huggingface_profile(model: str = DEFAULT_HF_MODEL, base_url: str = HF_INFERENCE_URL) -> ProviderProfile:
    def build_request(question: str, api_key: str) -> ProviderRequest:
        return ProviderRequest(
            method="POST",
            url=f"{base_url}/{model}",
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            json={
                "inputs": llama3_chat_prompt(question),
                "parameters": {
                    "max_new_tokens": MAX_NEW_TOKENS,
                    "return_full_text": False,
                },
            },
        )

    return ProviderProfile(
        name="huggingface",
        kind=ProviderKind.INFERENCE,
        build_request=build_request,
        extract_text=_extract_text,
        extract_error=_extract_error,
    )
