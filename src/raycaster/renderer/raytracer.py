# renderer/raytracer.py
import logging
import queue
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

import numpy as np

from raycaster.config import PROGRESS_INTERVAL, RENDER_CHUNKS
from raycaster.core.colour import Colour

logger = logging.getLogger(__name__)

# Marks a worker that has finished its chunk on the results queue
_CHUNK_DONE = object()


def new_canvas(width: int, height: int) -> np.ndarray:
    """
    Raster of linear RGB floats indexed [x, y], all black.
    """
    return np.zeros((width, height, 3), dtype=np.float64)


def write_pixel(canvas: np.ndarray, x: int, y: int, colour: Colour):
    canvas[x, y] = (colour.red, colour.green, colour.blue)


def pixel_colour(canvas: np.ndarray, x: int, y: int) -> Colour:
    r, g, b = canvas[x, y].tolist()
    return Colour(r, g, b)


def render(camera, world) -> np.ndarray:
    """
    Renders every pixel on the calling thread, column by column.
    """
    start = time.perf_counter()
    canvas = new_canvas(camera.hsize, camera.vsize)
    for x in range(camera.hsize):
        for y in range(camera.vsize):
            write_pixel(canvas, x, y, world.colour_at(camera.ray_for_pixel(x, y)))
    logger.info("Rendered %dx%d in %.2fs", camera.hsize, camera.vsize, time.perf_counter() - start)
    return canvas


def partition_pixels(width: int, height: int, chunks: int) -> List[np.ndarray]:
    """
    Splits the flat pixel index space (index = x * height + y) into at most
    `chunks` contiguous, non-empty slices of near-equal size.
    """
    total = width * height
    if total == 0:
        return []
    return np.array_split(np.arange(total), min(chunks, total))


def _render_chunk(camera, world, chunk_id: int, pixels: np.ndarray, results: "queue.Queue"):
    try:
        for index in pixels.tolist():
            x, y = divmod(index, camera.vsize)
            results.put((x, y, world.colour_at(camera.ray_for_pixel(x, y))))
    finally:
        results.put((_CHUNK_DONE, chunk_id, None))


def render_parallel(camera, world, chunks: int = RENDER_CHUNKS,
                    max_workers: Optional[int] = None) -> np.ndarray:
    """
    Renders the frame with one worker thread per pixel chunk.

    Workers only read the camera and the world. Each pushes (x, y, colour)
    onto a single queue; this thread drains it and is the only writer of the
    canvas. The result is identical to render().

    Args:
        camera: Camera producing the primary rays.
        world: Scene to shade.
        chunks: Number of contiguous pixel chunks.
        max_workers: Thread pool size, defaults to one thread per chunk.

    Returns:
        np.ndarray: (hsize, vsize, 3) raster.
    """
    start = time.perf_counter()
    canvas = new_canvas(camera.hsize, camera.vsize)
    work = partition_pixels(camera.hsize, camera.vsize, chunks)
    if not work:
        return canvas

    total = camera.hsize * camera.vsize
    results = queue.Queue()
    logger.info("Rendering %dx%d in %d chunks", camera.hsize, camera.vsize, len(work))

    with ThreadPoolExecutor(max_workers=max_workers or len(work)) as executor:
        futures = [
            executor.submit(_render_chunk, camera, world, chunk_id, pixels, results)
            for chunk_id, pixels in enumerate(work)
        ]

        pending = len(futures)
        count = 0
        while pending:
            x, y, colour = results.get()
            if x is _CHUNK_DONE:
                pending -= 1
                logger.debug("Chunk %d finished, %d remaining", y, pending)
                continue
            write_pixel(canvas, x, y, colour)
            count += 1
            if count % PROGRESS_INTERVAL == 0:
                logger.debug("%d / %d pixels", count, total)

    # Surface the first worker failure, if any
    for future in futures:
        future.result()

    logger.info("Rendered %dx%d in %.2fs", camera.hsize, camera.vsize, time.perf_counter() - start)
    return canvas
