"""
Prompt templates for script segmentation and visual prompt writing.
"""

from dataclasses import dataclass


@dataclass
class PromptTemplate:
    """
    A prompt template with ``{name}`` placeholders.

    Templates contain literal JSON braces, so formatting falls back to plain
    replacement of the provided keys when ``str.format`` fails.
    """
    template: str
    description: str = ""

    def format(self, **kwargs) -> str:
        try:
            return self.template.format(**kwargs)
        except (KeyError, ValueError, IndexError):
            result = self.template
            for k, v in kwargs.items():
                result = result.replace("{" + k + "}", str(v))
            return result


SEGMENT_SCRIPT = PromptTemplate(
    template="""You are a video script segmenter. Break down the provided script into meaningful chunks WITHOUT modifying the original text. Each chunk should:
1. Be 3-5 seconds of speaking time (roughly 8-15 words)
2. Form a complete thought or sentence fragment that makes sense
3. Be suitable for generating a single image that represents the content
4. Flow naturally from one chunk to the next
5. There can be a maximum of only {max_chunks} chunks
6. IMPORTANT: Use the EXACT original text without any modifications, corrections, or improvements

Respond with a JSON object: {"chunks": ["<original text of chunk 1>", "..."]}""",
    description="Split a narration script into verbatim chunks",
)


IMAGE_PROMPTS = PromptTemplate(
    template="""You are an expert at creating detailed image prompts for AI image generation that maintain visual consistency across a video sequence. For each script chunk provided, create a compelling visual prompt that:

1. Captures the essence and mood of the text
2. Is optimized for the {style_name} visual style
3. Includes cinematic composition details
4. Specifies lighting, atmosphere, and visual effects
5. Is detailed enough to generate high-quality, engaging images
6. MAINTAINS VISUAL CONSISTENCY: Each image should feel like a natural progression from the previous frame
7. CREATES SMOOTH TRANSITIONS: Include consistent elements like camera angle, lighting setup, color palette, and environmental details
8. PRESERVES CONTINUITY: Keep consistent character positioning, environmental context, and visual style throughout the sequence

Base image style: {style_prompt}

CRITICAL CONSISTENCY REQUIREMENTS:
- Maintain the same camera perspective/angle throughout the sequence
- Keep consistent lighting conditions (time of day, light sources, shadows)
- Preserve environmental elements (location, weather, atmosphere)
- Use consistent color palette and mood
- Each prompt should reference visual elements that connect to the previous scene

Respond with a JSON object: {"prompts": ["<prompt for chunk 1>", "..."]} containing exactly one prompt per chunk, in the same order.""",
    description="Write one continuity-aware visual prompt per chunk",
)


IMAGE_PROMPTS_USER = PromptTemplate(
    template="""Create visually consistent image prompts for these script chunks that will form a cohesive video sequence: {chunks_json}""",
    description="User turn for IMAGE_PROMPTS",
)


PREVIOUS_PROMPTS_CONTEXT = PromptTemplate(
    template="""

The sequence continues from these earlier image prompts; the first new prompt must connect visually to the last of them: {previous_json}""",
    description="Continuity context appended to IMAGE_PROMPTS_USER",
)


SEGMENT_SCHEMA = {
    "type": "object",
    "properties": {"chunks": {"type": "array", "items": {"type": "string"}}},
    "required": ["chunks"],
}

IMAGE_PROMPTS_SCHEMA = {
    "type": "object",
    "properties": {"prompts": {"type": "array", "items": {"type": "string"}}},
    "required": ["prompts"],
}
