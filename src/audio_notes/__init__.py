"""Audio-to-notes service: transcribe and summarize uploaded audio with Gemini."""
