# exporter.py
# Writes a Raster to disk through Pillow. The image format follows the
# file extension of the export path.

import os
import logging

from PIL import Image

from .errors import ExportError

logger = logging.getLogger(__name__)


def raster_to_image(raster):
    return Image.frombytes("RGBA", (raster.width, raster.height), raster.to_rgba_bytes())


def export_raster(raster, path):
    """
    Save raster to path, creating missing parent directories.
    :return: The path written.
    """
    directory = os.path.dirname(path)
    try:
        if directory:
            os.makedirs(directory, exist_ok=True)
        raster_to_image(raster).save(path)
    except (OSError, ValueError) as e:
        raise ExportError(f"Could not write `{path}`: {e}") from e
    logger.info("Exported %s to %s", raster, path)
    return path
