"""Domain services: tokenizer, playback engine, persistence and content store."""
