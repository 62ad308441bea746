#!/usr/bin/env python3
"""
FTC Vision runner - feeds still images or a live camera to a vision processor
and prints what it detects.

Frames are converted from OpenCV's BGR order to RGB before processing, the
same order the robot's camera host delivers.
"""

import argparse
import os
import sys
import time

import cv2

from ftc_vision.config.processor_config import ProcessorConfig, load_processor_config
from ftc_vision.diagnostics.performance_logger import PerformanceLogger
from ftc_vision.vision.pixel_processor import PixelProcessor
from ftc_vision.vision.team_prop import TeamPropProcessor

PROCESSORS = {
    'prop': TeamPropProcessor,
    'pixel': PixelProcessor,
}

WINDOW_NAME = "FTC Vision"


def create_processor(kind, config=None, perf_logger=None):
    """Create a processor by its short name ('prop' or 'pixel')."""
    try:
        processor_class = PROCESSORS[kind]
    except KeyError:
        raise ValueError(f"Unknown processor '{kind}', expected one of {sorted(PROCESSORS)}")
    return processor_class(config=config, perf_logger=perf_logger)


def describe_result(result):
    """Human readable form of a processor result."""
    if isinstance(result, tuple):
        top, bottom = result
        return f"top={top.value} bottom={bottom.value}"
    return f"{result.name} ({result.pos_num})"


def process_rgb_frame(processor, frame_rgb, perf_logger=None):
    """Run one RGB frame through the processor, re-initializing on a size change."""
    h, w = frame_rgb.shape[:2]
    if (processor.width, processor.height) != (w, h):
        processor.init(w, h)

    if perf_logger is None:
        return processor.process_frame(frame_rgb)

    with perf_logger.frame(processor.name):
        t0 = time.perf_counter()
        result = processor.process_frame(frame_rgb)
        perf_logger.log_timing("process_frame", (time.perf_counter() - t0) * 1000)
    return result


def output_path(save_dir, path, used_names):
    """Pick a file name in save_dir for an annotated copy of path.

    Inputs sharing a base name (e.g. left/frame.png and right/frame.png)
    get a numeric prefix so neither overwrites the other.
    """
    name = os.path.basename(path)
    candidate = name
    index = 1
    while candidate in used_names:
        candidate = f"{index}_{name}"
        index += 1
    used_names.add(candidate)
    return os.path.join(save_dir, candidate)


def show_frame(frame_rgb, wait_ms):
    """Display an annotated RGB frame; returns the key pressed (or -1)."""
    cv2.imshow(WINDOW_NAME, cv2.cvtColor(frame_rgb, cv2.COLOR_RGB2BGR))
    return cv2.waitKey(wait_ms) & 0xFF


def run_images(processor, image_paths, show=False, save_dir=None, perf_logger=None):
    """Process still images.

    Returns:
        Dict mapping each successfully read path to its result
    """
    results = {}
    used_names = set()
    if save_dir:
        os.makedirs(save_dir, exist_ok=True)

    for path in image_paths:
        frame_bgr = cv2.imread(path)
        if frame_bgr is None:
            print(f"Error reading image {path}")
            continue

        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        result = process_rgb_frame(processor, frame_rgb, perf_logger)
        results[path] = result
        print(f"{path}: {describe_result(result)}")

        if save_dir:
            out_path = output_path(save_dir, path, used_names)
            try:
                cv2.imwrite(out_path, cv2.cvtColor(frame_rgb, cv2.COLOR_RGB2BGR))
            except Exception as e:
                print(f"Error saving annotated frame to {out_path}: {e}")

        if show:
            show_frame(frame_rgb, 0)

    if show:
        cv2.destroyAllWindows()
    return results


def run_camera(processor, camera_index=0, show=False, perf_logger=None):
    """Process frames from a camera until it stops or 'q' is pressed.

    The result is printed whenever it changes.

    Returns:
        Process exit code
    """
    capture = cv2.VideoCapture(camera_index)
    if not capture.isOpened():
        print(f"Error: could not open camera {camera_index}")
        return 1

    last_result = None
    try:
        while True:
            ok, frame_bgr = capture.read()
            if not ok:
                print("Camera stream ended")
                break

            frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
            result = process_rgb_frame(processor, frame_rgb, perf_logger)
            if result != last_result:
                print(describe_result(result))
                last_result = result

            if show and show_frame(frame_rgb, 1) == ord('q'):
                break
    except KeyboardInterrupt:
        print("\nStopped")
    finally:
        capture.release()
        if show:
            cv2.destroyAllWindows()
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Run an FTC vision processor on images or a camera"
    )
    parser.add_argument(
        "--processor",
        choices=sorted(PROCESSORS),
        default="prop",
        help="Processor to run: team prop locator or intake pixel colors (default: prop)"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--image",
        action="append",
        help="Image file to process (repeatable)"
    )
    source.add_argument(
        "--camera",
        type=int,
        help="Camera index to stream from"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON file with thresholds and color ranges"
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Display annotated frames in a window"
    )
    parser.add_argument(
        "--save-dir",
        type=str,
        default=None,
        help="Directory to write annotated images to (image mode only)"
    )
    parser.add_argument(
        "--benchmark",
        action="store_true",
        help="Write per-frame stage timings to the performance log"
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory for the performance log (default: <repo>/log)"
    )

    args = parser.parse_args(argv)

    config = load_processor_config(args.config) if args.config else ProcessorConfig()
    if args.benchmark:
        config.benchmark = True

    perf_logger = PerformanceLogger(args.log_dir) if config.benchmark else None
    processor = create_processor(args.processor, config, perf_logger)

    if args.image:
        results = run_images(processor, args.image, args.show, args.save_dir, perf_logger)
        exit_code = 0 if results else 1
    else:
        exit_code = run_camera(processor, args.camera, args.show, perf_logger)

    if perf_logger is not None:
        perf_logger.write_summary()
        print(f"Performance log written to {perf_logger.log_file}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
