"""
Infrastructure Module - adapters for external collaborators

Organization:
    - llm/: text generation providers (Gemini)
    - parsing/: tolerant JSON parsing of LLM output
    - media/: image backends, speech synthesis, transcription
    - storage/: project repository and artifact storage
"""
