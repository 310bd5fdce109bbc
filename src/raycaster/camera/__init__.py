from raycaster.camera.camera import Camera
