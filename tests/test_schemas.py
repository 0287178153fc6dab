import pytest
from pydantic import ValidationError

from magicquill_client.schemas import (FromFrontend, GenerateParams,
                                       GenerateRequest, GenerateResponse,
                                       PromptGuessRequest)


def _frontend():
    return FromFrontend(
        total_mask="m", original_image="o", add_color_image="c", add_edge_image="e", remove_edge_image="r"
    )


def test_prompt_guess_request_omits_missing_images():
    assert PromptGuessRequest(original_image="o").to_payload() == {"original_image": "o"}
    assert PromptGuessRequest(original_image="o", add_edge_image="e").to_payload() == {
        "original_image": "o",
        "add_edge_image": "e",
    }


def test_prompt_guess_request_requires_original():
    with pytest.raises(ValidationError):
        PromptGuessRequest()


def test_generate_params_defaults():
    params = GenerateParams()
    assert params.ckpt_name == "SD1.5/realisticVisionV60B1_v51VAE.safetensors"
    assert params.seed == -1
    assert params.steps == 20
    assert params.cfg == 5.0
    assert params.sampler_name == "euler_ancestral"
    assert params.scheduler == "karras"
    assert params.fine_edge == "disable"


@pytest.mark.parametrize(
    "field,value",
    [("sampler_name", "not_a_sampler"), ("scheduler", "weekly"), ("seed", -2), ("steps", 0), ("fine_edge", "yes")],
)
def test_generate_params_rejects_invalid(field, value):
    with pytest.raises(ValidationError):
        GenerateParams(**{field: value})


def test_generate_request_with_seed_copies():
    request = GenerateRequest(from_frontend=_frontend())
    seeded = request.with_seed(99)
    assert seeded.params.seed == 99
    assert request.params.seed == -1
    assert seeded.from_frontend == request.from_frontend


def test_generate_response_metadata_default():
    response = GenerateResponse.model_validate({"generated_image": "data:image/png;base64,YWJj", "seed": 5})
    assert response.metadata == {}
