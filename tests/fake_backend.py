import random
from typing import Optional

from fastapi import Body, FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from PIL import Image
from pydantic import BaseModel

from magicquill_client.services.images import (data_uri_to_image,
                                               image_to_data_uri,
                                               scale_to_longest_side)

FAKE_PROMPT = "a red apple, wooden table, soft light"


class GuessPromptBody(BaseModel):
    original_image: str
    add_color_image: Optional[str] = None
    add_edge_image: Optional[str] = None


def create_fake_backend(resolution: int = 512, generate_enabled: bool = True) -> FastAPI:
    """Stand-in for the MagicQuill endpoints, recording what it receives."""
    app = FastAPI()
    app.state.requests = []
    app.state.resolution = resolution
    app.state.generate_enabled = generate_enabled
    app.state.prompt = FAKE_PROMPT
    app.state.plain_text = False
    app.state.fail_with = None

    def record(path, body):
        app.state.requests.append((path, body))
        if app.state.fail_with:
            raise HTTPException(status_code=app.state.fail_with, detail="backend exploded")

    @app.post("/magic_quill/guess_prompt")
    async def guess_prompt(body: GuessPromptBody):
        record("guess_prompt", body.model_dump(exclude_unset=True))
        if app.state.plain_text:
            return PlainTextResponse(app.state.prompt)
        return app.state.prompt

    @app.post("/magic_quill/process_background_img")
    async def process_background_img(image: str = Body(...)):
        record("process_background_img", image)
        img = data_uri_to_image(image)
        return image_to_data_uri(scale_to_longest_side(img, app.state.resolution))

    @app.post("/magic_quill/generate")
    async def generate(body: dict = Body(...)):
        if not app.state.generate_enabled:
            raise HTTPException(status_code=404, detail="Not Found")
        record("generate", body)
        seed = body["params"]["seed"]
        if seed == -1:
            seed = random.randint(0, 2**32 - 1)
        rng = random.Random(seed)
        color = (rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))
        return {
            "generated_image": image_to_data_uri(Image.new("RGB", (64, 64), color)),
            "seed": seed,
            "metadata": {"ckpt_name": body["params"]["ckpt_name"]},
        }

    return app
