"""Performance logging for vision processors to identify slow stages."""

import time
from contextlib import contextmanager
from pathlib import Path
from datetime import datetime


class PerformanceLogger:
    """
    File log of per-frame processor stage timings.

    Each frame is written as one block: the frame label, total time and every
    stage logged while the frame was open. Stage timings are also accumulated
    so a run can end with a per-stage summary.

    Attributes:
        log_file: Path of the timestamped log file
        timings: Stage -> duration (ms) for the frame currently open
        stage_stats: Stage -> [count, total_ms, max_ms] across all frames
        frames_logged: Number of frame blocks written
    """

    def __init__(self, log_dir=None):
        """Initialize performance logger with log directory."""
        if log_dir is None:
            # Default to log directory at repo root
            repo_root = Path(__file__).parent.parent.parent.parent
            log_dir = repo_root / "log"

        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.log_file = self.log_dir / f"vision_performance_{timestamp}.log"

        with open(self.log_file, 'w') as f:
            f.write(f"Vision Performance Log - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
            f.write("=" * 80 + "\n\n")

        self.timings = {}
        self.stage_stats = {}
        self.frame_start = None
        self.frame_label = None
        self.frames_logged = 0

    @property
    def in_frame(self):
        return self.frame_start is not None

    def start_frame(self, label=None):
        """Open a frame; stages logged until end_frame() belong to it."""
        self.frame_start = time.perf_counter()
        self.frame_label = label
        self.timings = {}

    def log_timing(self, stage, duration_ms):
        """Record the duration of one stage of the open frame."""
        self.timings[stage] = duration_ms
        stats = self.stage_stats.setdefault(stage, [0, 0.0, 0.0])
        stats[0] += 1
        stats[1] += duration_ms
        stats[2] = max(stats[2], duration_ms)

    def end_frame(self):
        """Close the open frame and append its block to the log."""
        if self.frame_start is None:
            return

        total_frame_time = (time.perf_counter() - self.frame_start) * 1000
        label = f" [{self.frame_label}]" if self.frame_label else ""

        with open(self.log_file, 'a') as f:
            f.write(f"Frame{label} @ {datetime.now().strftime('%H:%M:%S.%f')[:-3]}\n")
            f.write(f"  Total frame time: {total_frame_time:.3f}ms\n")

            for stage, duration in self.timings.items():
                percentage = (duration / total_frame_time * 100) if total_frame_time > 0 else 0
                f.write(f"  {stage}: {duration:.3f}ms ({percentage:.1f}%)\n")

            f.write("\n")

        self.frames_logged += 1
        self.frame_start = None
        self.frame_label = None
        self.timings = {}

    @contextmanager
    def frame(self, label=None):
        """Time a frame, unless a caller already has one open.

        A processor called directly by the camera host opens and writes its
        own frame; inside a runner's frame its stages join the runner's block.
        """
        if self.in_frame:
            yield self
            return

        self.start_frame(label)
        try:
            yield self
        finally:
            self.end_frame()

    def stage_summary(self):
        """Return stage -> {'count', 'mean_ms', 'max_ms'} across all frames."""
        return {
            stage: {'count': count, 'mean_ms': total / count, 'max_ms': peak}
            for stage, (count, total, peak) in self.stage_stats.items()
        }

    def write_summary(self):
        """Append the per-stage summary to the log."""
        summary = self.stage_summary()
        if not summary:
            return

        with open(self.log_file, 'a') as f:
            f.write("=" * 80 + "\n")
            f.write(f"Summary: {self.frames_logged} frame(s)\n")
            for stage, stats in summary.items():
                f.write(f"  {stage}: mean {stats['mean_ms']:.3f}ms, "
                        f"max {stats['max_ms']:.3f}ms over {stats['count']} call(s)\n")


# Global logger instance
_logger = None


def get_logger(log_dir=None):
    """Get or create the global performance logger."""
    global _logger
    if _logger is None:
        _logger = PerformanceLogger(log_dir)
    return _logger
