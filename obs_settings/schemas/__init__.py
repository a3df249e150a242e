from .common import (
    AspectPreset,
    BoundingSize,
    ColorRange,
    ColorSpace,
    CustomRatio,
    CustomSize,
    Font,
    FontFlags,
    FrameRate,
    PlaybackBehavior,
    Resolution,
    Rgba8,
    SlideMode,
    SlideshowFile,
    Transition,
    VideoRange,
    format_custom_size,
    parse_custom_size,
)
from .crop import (
    CropManual,
    CropMode,
    CropNone,
    CropToWindow,
    CropToWindowAndManual,
    encode_crop_mode,
)
from .sources import (
    AvCaptureInput,
    BrowserSource,
    ColorSourceV3,
    CoreaudioInputCapture,
    CoreaudioOutputCapture,
    DisplayCapture,
    FfmpegSource,
    ImageSource,
    Slideshow,
    SourceSettingsModel,
    TextFt2SourceV2,
    VlcSource,
    WindowCapture,
)

__all__ = [
    "AspectPreset",
    "AvCaptureInput",
    "BoundingSize",
    "BrowserSource",
    "ColorRange",
    "ColorSourceV3",
    "ColorSpace",
    "CoreaudioInputCapture",
    "CoreaudioOutputCapture",
    "CropManual",
    "CropMode",
    "CropNone",
    "CropToWindow",
    "CropToWindowAndManual",
    "CustomRatio",
    "CustomSize",
    "DisplayCapture",
    "FfmpegSource",
    "Font",
    "FontFlags",
    "FrameRate",
    "ImageSource",
    "PlaybackBehavior",
    "Resolution",
    "Rgba8",
    "SlideMode",
    "Slideshow",
    "SlideshowFile",
    "SourceSettingsModel",
    "TextFt2SourceV2",
    "Transition",
    "VideoRange",
    "VlcSource",
    "WindowCapture",
    "encode_crop_mode",
    "format_custom_size",
    "parse_custom_size",
]
