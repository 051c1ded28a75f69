"""Core logic for generate: run mtn on videos and collect what it produced."""

import codecs
import logging
import os
import subprocess
import threading
import time
from collections.abc import Callable
from pathlib import Path
from typing import IO, List, Optional, Tuple

from mtn_thumbnailer.models.options import ThumbnailOptions
from mtn_thumbnailer.models.results import ThumbnailProgress, ThumbnailResult, VideoMetadata
from mtn_thumbnailer.parsing.output import parse_progress
from mtn_thumbnailer.probe import main as probe
from mtn_thumbnailer.thumbnail.arguments import build_arguments
from mtn_thumbnailer.thumbnail.paths import resolve_output_paths, snapshot_individual_shots
from mtn_thumbnailer.utils.dependencies import locate_mtn

# mtn exits with 1 when it produced output but something was off
SUCCESS_EXIT_CODES = (0, 1)
LAUNCH_FAILED_EXIT_CODE = -1
CHUNK_SIZE = 4096

ProgressCallback = Callable[[ThumbnailProgress], None]
BatchProgressCallback = Callable[[str, ThumbnailProgress], None]
ProgressParser = Callable[[str], List[ThumbnailProgress]]

logger = logging.getLogger(__name__)


def read_chunks(pipe: IO[bytes]):
    """Yield decoded text from a pipe as soon as it arrives, until EOF."""
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    for chunk in iter(lambda: pipe.read1(CHUNK_SIZE), b""):
        text = decoder.decode(chunk)
        if text:
            yield text
    tail = decoder.decode(b"", final=True)
    if tail:
        yield tail


def drain(pipe: IO[bytes], chunks: List[str]) -> None:
    """Collect everything from a pipe into chunks."""
    for text in read_chunks(pipe):
        chunks.append(text)


class MtnThumbnailer:
    """Generate video thumbnails and contact sheets with mtn.

    Example usage:
        thumbnailer = MtnThumbnailer()
        result = thumbnailer.generate_thumbnail("movie.mp4", ThumbnailOptions(columns=4, rows=3))
        if result.success:
            print(result.output_path)
    """

    def __init__(
        self,
        mtn_path: Optional[str] = None,
        timeout: Optional[float] = None,
        progress_parser: ProgressParser = parse_progress,
    ) -> None:
        """Create a thumbnailer.

        Args:
            mtn_path: Path to the mtn binary. Auto-detected when omitted.
            timeout: Seconds after which a run is killed. No limit when omitted.
            progress_parser: Turns a chunk of mtn stdout into progress events.
        """
        self.mtn_path = locate_mtn(mtn_path)
        self.timeout = timeout
        self.progress_parser = progress_parser

    def generate_thumbnail(
        self,
        video_path: str,
        options: Optional[ThumbnailOptions] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ThumbnailResult:
        """Run mtn on one video.

        Never raises for mtn problems: a missing input, a binary that can't be
        launched and a bad exit code all come back as a failed result.

        Args:
            video_path: Path to the video file.
            options: mtn options, mtn defaults when omitted.
            on_progress: Called with each progress event scraped from stdout.
        """
        start_time = time.perf_counter()
        options = options or ThumbnailOptions()

        if not os.path.exists(video_path):
            logger.error(f"Video file not found: {video_path}")
            return self._failure(f"Video file not found: {video_path}", start_time)

        args = build_arguments(video_path, options)

        if options.output_dir and not os.path.exists(options.output_dir):
            try:
                Path(options.output_dir).mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.error(f"Cannot create output directory {options.output_dir}: {e}")
                return self._failure(f"Cannot create output directory {options.output_dir}: {e}", start_time)

        previous_shots = None
        if options.save_individual is not None and options.save_individual.codes():
            previous_shots = snapshot_individual_shots(video_path, options)

        cmd = [self.mtn_path, *args]
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            proc: subprocess.Popen[bytes] = subprocess.Popen(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
        except OSError as e:
            logger.error(f"Failed to start mtn: {e}")
            return self._failure(f"Failed to execute mtn: {e}", start_time)

        with proc:
            stdout_text, stderr_text, timed_out = self._collect_output(proc, on_progress)

        exit_code = proc.returncode if proc.returncode is not None else 0
        success = exit_code in SUCCESS_EXIT_CODES and not timed_out

        error = None
        if timed_out:
            error = f"mtn timed out after {self.timeout}s"
        elif not success:
            error = f"mtn exited with code {exit_code}"

        paths = resolve_output_paths(video_path, options, previous_shots)
        execution_time = time.perf_counter() - start_time

        if success:
            logger.info(f"Generated {paths.output_path} in {execution_time:.2f}s")
        else:
            logger.warning(f"mtn failed on {video_path}: {error}")

        return ThumbnailResult(
            success=success,
            output_path=paths.output_path,
            info_path=paths.info_path,
            cover_path=paths.cover_path,
            individual_shots=paths.individual_shots,
            web_vtt_path=paths.web_vtt_path,
            execution_time=execution_time,
            output=stdout_text + stderr_text,
            error=error,
            exit_code=exit_code,
        )

    def generate_thumbnails(
        self,
        video_paths: List[str],
        options: Optional[ThumbnailOptions] = None,
        on_progress: Optional[BatchProgressCallback] = None,
    ) -> List[ThumbnailResult]:
        """Run mtn on each video in turn, one result per input, in input order.

        A failing video doesn't stop the rest.
        """
        results: List[ThumbnailResult] = []

        for video_path in video_paths:
            progress_callback = None
            if on_progress is not None:
                progress_callback = lambda progress, path=video_path: on_progress(path, progress)

            results.append(self.generate_thumbnail(video_path, options, progress_callback))

        failed = sum(1 for result in results if not result.success)
        logger.info(f"Processed {len(results)} videos, {failed} failed")
        return results

    def get_video_metadata(self, video_path: str) -> VideoMetadata:
        return probe.get_video_metadata(self.mtn_path, video_path, timeout=self.timeout)

    def check_availability(self) -> bool:
        return probe.check_availability(self.mtn_path, timeout=self.timeout)

    def get_version(self) -> str:
        return probe.get_version(self.mtn_path, timeout=self.timeout)

    def _collect_output(
        self,
        proc: subprocess.Popen,
        on_progress: Optional[ProgressCallback],
    ) -> Tuple[str, str, bool]:
        """Read stdout (reporting progress) and stderr until mtn exits.

        stderr is drained on a separate thread so a full pipe can't block mtn.
        Returns (stdout, stderr, timed_out).
        """
        stdout_chunks: List[str] = []
        stderr_chunks: List[str] = []
        timed_out = threading.Event()

        def expire() -> None:
            timed_out.set()
            proc.kill()

        timer = None
        if self.timeout is not None:
            timer = threading.Timer(self.timeout, expire)
            timer.start()

        stderr_thread = threading.Thread(target=drain, args=(proc.stderr, stderr_chunks))
        stderr_thread.start()

        try:
            for text in read_chunks(proc.stdout):
                stdout_chunks.append(text)
                if on_progress is not None:
                    for event in self.progress_parser(text):
                        on_progress(event)
            proc.wait()
        except BaseException:
            proc.kill()
            raise
        finally:
            if timer is not None:
                timer.cancel()
            stderr_thread.join()

        # The timer may fire after mtn exited on its own; only a kill counts
        killed = proc.returncode is not None and proc.returncode < 0
        return "".join(stdout_chunks), "".join(stderr_chunks), timed_out.is_set() and killed

    def _failure(self, error: str, start_time: float) -> ThumbnailResult:
        return ThumbnailResult(
            success=False,
            error=error,
            execution_time=time.perf_counter() - start_time,
            output="",
            exit_code=LAUNCH_FAILED_EXIT_CODE,
        )


def create_thumbnailer(mtn_path: Optional[str] = None) -> MtnThumbnailer:
    """Convenience factory for MtnThumbnailer."""
    return MtnThumbnailer(mtn_path)
