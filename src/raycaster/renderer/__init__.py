from raycaster.renderer.raytracer import new_canvas, partition_pixels, pixel_colour, render, render_parallel, write_pixel
