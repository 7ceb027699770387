"""
Services

Organization:
    - captions/: word batching, caption resolution, playback timeline
    - pipeline/: planning, media generation, orchestration
    - infrastructure/: adapters for LLMs, media providers and storage
    - use_cases/: business operations called by routes
"""
