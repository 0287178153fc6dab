"""
Backend checklist

Runs the manual test checklist for a MagicQuill deployment against a live
server, using a single sample drawing:

- guess_prompt with only the original image
- guess_prompt with the original, color and edge images
- process_background_img with several input sizes
- generate with a fixed seed (twice) and with seed -1, only on request
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from PIL import Image, ImageDraw

from magicquill_client import config
from magicquill_client.client import MagicQuillClient
from magicquill_client.errors import InvalidImageError, MagicQuillError
from magicquill_client.schemas import FromBackend, FromFrontend, GenerateRequest
from magicquill_client.services.images import (empty_mask, image_size,
                                               image_to_data_uri,
                                               is_resized_to,
                                               scale_to_longest_side)

logger = logging.getLogger(__name__)

FIXED_SEED = 42

GUESS_ORIGINAL_ONLY = "guess_prompt (original only)"
GUESS_ALL_IMAGES = "guess_prompt (all images)"
GENERATE_FIXED_SEED = "generate (fixed seed)"
GENERATE_RANDOM_SEED = "generate (seed -1)"


@dataclass
class CheckResult:
    name: str
    passed: bool
    detail: str = ""


def background_check_name(input_resolution: int) -> str:
    return f"process_background_img ({input_resolution}px)"


def _color_strokes(img: Image.Image) -> Image.Image:
    strokes = img.convert("RGBA")
    draw = ImageDraw.Draw(strokes)
    w, h = strokes.size
    draw.ellipse((w // 4, h // 4, w // 2, h // 2), fill=(220, 40, 40, 255))
    return strokes


def _edge_strokes(size: tuple[int, int]) -> Image.Image:
    edges = Image.new("RGBA", size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(edges)
    w, h = size
    draw.line((w // 8, h // 2, w - w // 8, h // 2), fill=(255, 255, 255, 255), width=max(1, w // 64))
    return edges


def check_guess_prompt_original_only(client: MagicQuillClient, image: Image.Image) -> CheckResult:
    prompt = client.guess_prompt(image_to_data_uri(image))
    return CheckResult(GUESS_ORIGINAL_ONLY, bool(prompt.strip()), repr(prompt))


def check_guess_prompt_all_images(client: MagicQuillClient, image: Image.Image) -> CheckResult:
    prompt = client.guess_prompt(
        image_to_data_uri(image),
        add_color_image=image_to_data_uri(_color_strokes(image)),
        add_edge_image=image_to_data_uri(_edge_strokes(image.size)),
    )
    return CheckResult(GUESS_ALL_IMAGES, bool(prompt.strip()), repr(prompt))


def check_background_resize(
    client: MagicQuillClient, image: Image.Image, input_resolution: int, target_resolution: int
) -> CheckResult:
    """
    Sends the image scaled to input_resolution and checks that the backend
    resized it so its longer side is target_resolution.
    """
    name = background_check_name(input_resolution)
    sent = scale_to_longest_side(image, input_resolution)
    result = client.process_background_img(image_to_data_uri(sent))
    try:
        size = image_size(result)
    except InvalidImageError as e:
        return CheckResult(name, False, str(e))
    detail = f"sent {sent.size[0]}x{sent.size[1]}, got {size[0]}x{size[1]}, expected longest side {target_resolution}"
    return CheckResult(name, is_resized_to(result, target_resolution), detail)


def build_generate_request(image: Image.Image, prompt: str, seed: int) -> GenerateRequest:
    original = image_to_data_uri(image)
    blank = empty_mask(image.size)
    return GenerateRequest(
        from_frontend=FromFrontend(
            total_mask=image_to_data_uri(_edge_strokes(image.size)),
            original_image=original,
            add_color_image=image_to_data_uri(_color_strokes(image)),
            add_edge_image=image_to_data_uri(_edge_strokes(image.size)),
            remove_edge_image=blank,
        ),
        from_backend=FromBackend(prompt=prompt),
    ).with_seed(seed)


def check_generate_fixed_seed(client: MagicQuillClient, image: Image.Image, prompt: str = "") -> CheckResult:
    request = build_generate_request(image, prompt, FIXED_SEED)
    first = client.generate(request)
    second = client.generate(request)
    passed = (
        first.generated_image == second.generated_image
        and first.seed == FIXED_SEED
        and second.seed == FIXED_SEED
    )
    return CheckResult(GENERATE_FIXED_SEED, passed, f"seeds {first.seed}, {second.seed}")


def check_generate_random_seed(client: MagicQuillClient, image: Image.Image, prompt: str = "") -> CheckResult:
    result = client.generate(build_generate_request(image, prompt, -1))
    return CheckResult(GENERATE_RANDOM_SEED, result.seed >= 0, f"server chose seed {result.seed}")


def _run(name: str, check, *args) -> CheckResult:
    try:
        result = check(*args)
    except MagicQuillError as e:
        logger.error(f"{name} failed: {e}")
        return CheckResult(name, False, str(e))
    logger.info(f"{result.name}: {'OK' if result.passed else 'FAILED'} {result.detail}")
    return result


def run_checklist(
    client: MagicQuillClient,
    image: Image.Image,
    input_resolutions: Optional[Iterable[int]] = None,
    target_resolution: int = config.BACKGROUND_RESOLUTION,
    include_generate: bool = False,
    prompt: str = "",
) -> list[CheckResult]:
    if input_resolutions is None:
        input_resolutions = config.CHECKLIST_RESOLUTIONS
    image = image.convert("RGB")

    results = [
        _run(GUESS_ORIGINAL_ONLY, check_guess_prompt_original_only, client, image),
        _run(GUESS_ALL_IMAGES, check_guess_prompt_all_images, client, image),
    ]
    for resolution in input_resolutions:
        results.append(_run(background_check_name(resolution), check_background_resize, client, image, resolution, target_resolution))
    if include_generate:
        results.append(_run(GENERATE_FIXED_SEED, check_generate_fixed_seed, client, image, prompt))
        results.append(_run(GENERATE_RANDOM_SEED, check_generate_random_seed, client, image, prompt))
    return results
