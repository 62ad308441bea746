"""Processor configuration module - thresholds and color ranges."""

from ftc_vision.config.processor_config import (
    ProcessorConfig,
    load_processor_config,
    save_processor_config,
)

__all__ = ['ProcessorConfig', 'load_processor_config', 'save_processor_config']
