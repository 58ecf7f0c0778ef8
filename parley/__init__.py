"""parley: session, security and streaming layer for a speech-to-speech translation API."""
