"""Bridges between object storage and the base64 tuples the services consume."""

import base64
import binascii
import logging
from typing import Callable, Optional, Sequence

from designengine.interfaces import ObjectStore
from designengine.models.requests import ReferenceImage
from designengine.models.responses import GenerationResult

logger = logging.getLogger(__name__)

MAX_REFERENCE_IMAGES = 8
DEFAULT_MIME_TYPE = "image/jpeg"


async def load_reference_images(
    store: ObjectStore,
    assets: Sequence[tuple[str, Optional[str]]],
    limit: int = MAX_REFERENCE_IMAGES,
) -> list[ReferenceImage]:
    """
    Fetch up to ``limit`` stored images as base64 reference images.

    Args:
        store: Object storage collaborator
        assets: (key, mime type) pairs in board order; a missing mime defaults to image/jpeg
        limit: Maximum number of assets to load

    Returns:
        The references that loaded; assets that fail to load are logged and skipped
    """
    references: list[ReferenceImage] = []
    for key, mime_type in list(assets)[:limit]:
        try:
            data = await store.get(key)
        except Exception as e:
            logger.error(f"❌ [AssetService] Failed to load reference image {key}: {str(e)}")
            continue

        if not data:
            logger.warning(f"🚫 [AssetService] Reference image {key} is empty, skipping")
            continue

        references.append(
            ReferenceImage(
                base64=base64.b64encode(data).decode("ascii"),
                mime_type=mime_type or DEFAULT_MIME_TYPE,
            )
        )
    return references


async def upload_generated_images(
    store: ObjectStore,
    images: Sequence[GenerationResult],
    key_factory: Callable[[int, GenerationResult], str],
) -> list[str]:
    """
    Decode and upload generated images, returning their public URLs.

    Non-image results are ignored. A failed upload is logged and skipped so the
    caller can still report how many of the requested images were stored.
    """
    urls: list[str] = []
    for index, image in enumerate(images):
        if not image.is_image:
            continue

        try:
            data = base64.b64decode(image.base64, validate=True)
        except binascii.Error as e:
            logger.error(f"❌ [AssetService] Generated image {index} is not valid base64: {str(e)}")
            continue

        key = key_factory(index, image)
        try:
            urls.append(await store.upload(key, data, image.mime_type))
        except Exception as e:
            logger.error(f"❌ [AssetService] Failed to upload {key}: {str(e)}")
    return urls
