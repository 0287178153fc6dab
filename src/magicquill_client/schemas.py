"""
Data models for the MagicQuill endpoints

Defines the Pydantic schemas used to:
- Build the JSON payloads sent to the backend
- Validate the JSON returned by the backend

Every image field is a base64 data URI string.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

SamplerName = Literal[
    "euler",
    "euler_ancestral",
    "heun",
    "heunpp2",
    "dpm_2",
    "dpm_2_ancestral",
    "lms",
    "dpm_fast",
    "dpm_adaptive",
    "dpmpp_2s_ancestral",
    "dpmpp_sde",
    "dpmpp_sde_gpu",
    "dpmpp_2m",
    "dpmpp_2m_sde",
    "dpmpp_2m_sde_gpu",
    "dpmpp_3m_sde",
    "dpmpp_3m_sde_gpu",
    "ddpm",
    "lcm",
    "ddim",
    "uni_pc",
    "uni_pc_bh2",
]

Scheduler = Literal["normal", "karras", "exponential", "sgm_uniform", "simple", "ddim_uniform"]


class PromptGuessRequest(BaseModel):
    original_image: str
    # None lets the backend fall back to original_image
    add_color_image: Optional[str] = None
    # None lets the backend fall back to an empty mask
    add_edge_image: Optional[str] = None

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)


class FromFrontend(BaseModel):
    total_mask: str
    original_image: str
    add_color_image: str
    add_edge_image: str
    remove_edge_image: str


class FromBackend(BaseModel):
    prompt: str = ""


class GenerateParams(BaseModel):
    ckpt_name: str = "SD1.5/realisticVisionV60B1_v51VAE.safetensors"
    negative_prompt: str = ""
    fine_edge: Literal["enable", "disable"] = "disable"
    grow_size: int = Field(default=15, ge=0)
    edge_strength: float = Field(default=0.55, ge=0.0)
    color_strength: float = Field(default=0.55, ge=0.0)
    inpaint_strength: float = Field(default=1.0, ge=0.0)
    seed: int = Field(default=-1, ge=-1)
    steps: int = Field(default=20, ge=1)
    cfg: float = Field(default=5.0, ge=0.0)
    sampler_name: SamplerName = "euler_ancestral"
    scheduler: Scheduler = "karras"


class GenerateRequest(BaseModel):
    from_frontend: FromFrontend
    from_backend: FromBackend = Field(default_factory=FromBackend)
    params: GenerateParams = Field(default_factory=GenerateParams)

    def with_seed(self, seed: int) -> "GenerateRequest":
        """Return a copy of the request using another seed."""
        params = self.params.model_copy(update={"seed": seed})
        return self.model_copy(update={"params": params})


class GenerateResponse(BaseModel):
    generated_image: str
    seed: int
    metadata: dict[str, Any] = Field(default_factory=dict)
