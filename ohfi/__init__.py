"""Lo-fi audio effect: parameters, per-sample DSP, buffer effect and authoring block writer."""

__version__ = "0.1.0"

__all__ = ["params", "dsp", "effect", "authoring"]