import logging
import os
from datetime import datetime

import cv2
import numpy as np
import pygame

logger = logging.getLogger(__name__)


def surface_to_frame(surface: pygame.Surface) -> np.ndarray:
    """Converts a pygame surface to an OpenCV (height, width, 3) BGR frame."""
    view = pygame.surfarray.array3d(surface)
    # view is (width, height, 3) RGB
    frame = np.ascontiguousarray(np.transpose(view, (1, 0, 2)))
    return cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)


def default_output_file(width: int, height: int, directory: str = "recordings") -> str:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    return os.path.join(directory, f"maze_run_{width}x{height}_{ts}.mp4")


class VideoRecorder:
    """Writes every rendered game frame to an .mp4 while active."""

    def __init__(self, active=False, output_file=None, fps=30):
        self.active = active
        self.output_file = output_file
        self.fps = fps
        self.writer = None
        self.frame_size = None
        self.frame_count = 0

    def capture_frame(self, surface: pygame.Surface):
        if not self.active:
            return

        if self.writer is None:
            if not self.output_file:
                raise ValueError("VideoRecorder needs an output_file before capturing")
            directory = os.path.dirname(self.output_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            self.frame_size = surface.get_size()
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, self.frame_size)
            logger.info(f"Recording started: {self.output_file}")

        if surface.get_size() != self.frame_size:
            # mp4 streams have a fixed size; drop frames taken mid-resize
            logger.debug(f"Skipping frame of size {surface.get_size()}")
            return

        self.writer.write(surface_to_frame(surface))
        self.frame_count += 1

    def stop(self):
        if self.writer:
            self.writer.release()
            logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames)")
            self.writer = None
