"""Translate ThumbnailOptions into an mtn argument vector."""

from typing import List, Union

from mtn_thumbnailer.models.options import ThumbnailOptions


def format_number(value: Union[int, float]) -> str:
    """Render a number the way mtn reads it: 30.0 becomes '30', 0.8 stays '0.8'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_arguments(video_path: str, options: ThumbnailOptions) -> List[str]:
    """Build the mtn command-line arguments for one video.

    Most fields are only passed when truthy, so a numeric 0 means "unset".
    rows, width, video_stream, shadow and depth are checked against None
    instead, which keeps 0 usable for them. The video path always comes last.
    """
    args: List[str] = []

    # Output
    if options.output_dir:
        args += ["-O", options.output_dir]
    if options.output_suffix:
        args += ["-o", options.output_suffix]
    if options.use_full_filename:
        args.append("-X")
    if options.custom_filename:
        args += ["-x", options.custom_filename]
    if options.no_overwrite:
        args.append("-W")

    # Grid
    if options.columns:
        args += ["-c", format_number(options.columns)]
    if options.rows is not None:
        args += ["-r", format_number(options.rows)]
    if options.step:
        args += ["-s", format_number(options.step)]
    if options.min_height:
        args += ["-h", format_number(options.min_height)]
    if options.width is not None:
        args += ["-w", format_number(options.width)]
    if options.gap:
        args += ["-g", format_number(options.gap)]

    # Appearance
    if options.font:
        args += ["-f", options.font]
    if options.background_color:
        args += ["-k", options.background_color]
    if options.jpeg_quality:
        args += ["-j", format_number(options.jpeg_quality)]
    # These two are on by default in mtn, the flags turn them off
    if options.show_info is False:
        args.append("-i")
    if options.show_timestamp is False:
        args.append("-t")
    if options.additional_text:
        args += ["-T", options.additional_text]

    # Detection
    if options.edge_detection:
        args += ["-D", format_number(options.edge_detection)]
    if options.blank_threshold:
        args += ["-b", format_number(options.blank_threshold)]

    # Timing
    if options.skip_beginning:
        args += ["-B", format_number(options.skip_beginning)]
    if options.skip_end:
        args += ["-E", format_number(options.skip_end)]
    if options.cut_duration:
        args += ["-C", format_number(options.cut_duration)]

    # Streams
    if options.video_stream is not None:
        args += ["-S", format_number(options.video_stream)]

    # Modes
    if options.verbose:
        args.append("-v")
    if options.quiet:
        args.append("-q")
    if options.seek_mode:
        args.append("-z")
    if options.non_seek_mode:
        args.append("-Z")

    # Advanced
    if options.aspect_ratio:
        args += ["-a", format_number(options.aspect_ratio)]
    if options.shadow is not None:
        # A boolean asks for mtn's default radius
        args += ["--shadow", "" if isinstance(options.shadow, bool) else format_number(options.shadow)]
    if options.transparent:
        args.append("--transparent")
    if options.extract_cover:
        args.append("--cover")
    if options.web_vtt:
        args += ["--vtt", options.web_vtt]
    if options.filters:
        args += ["--filters", options.filters]
    if options.tonemap:
        args.append("--tonemap")

    # Directories
    if options.depth is not None:
        args += ["-d", format_number(options.depth)]
    if options.extensions is not None:
        args += ["-e", ",".join(options.extensions)]

    # Individual shots
    if options.save_individual is not None:
        codes = options.save_individual.codes()
        if codes:
            args += ["-I", codes]

    # Info file
    if options.info_suffix:
        args += ["-N", options.info_suffix]

    args.append(video_path)
    return args
