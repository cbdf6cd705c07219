"""AI image generation."""

from ..base import ToolParameter
from ..proxy import ProxyTool, fields

generate_ai_image = ProxyTool(
    name="generate-ai-image",
    description="Generate images from a text prompt.",
    action="generate AI image",
    category="images",
    parameters=(
        ToolParameter("prompt", "string", "Description of the image to generate", required=True),
        ToolParameter("model", "string", "Image model to use"),
        ToolParameter("size", "string", "Output size, e.g. '1024x1024'"),
        ToolParameter("style", "string", "Visual style preset"),
        ToolParameter("negativePrompt", "string", "What the image should not contain"),
        ToolParameter("seed", "integer", "Random seed for reproducible output"),
        ToolParameter("steps", "integer", "Number of inference steps"),
        ToolParameter("guidanceScale", "number", "How strictly to follow the prompt"),
        ToolParameter("sampler", "string", "Sampling method"),
        ToolParameter("numOutputs", "integer", "Number of images to generate"),
    ),
    project=fields("images", "creditUsage?"),
)
