"""JSON output for extracted chunks."""
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from chunkers.base import Chunk

logger = logging.getLogger(__name__)

OUTPUT_VERSION = "1.0.0"


def chunks_to_document(chunks: list[Chunk]) -> dict:
    """Wrap chunk records with a metadata header."""
    return {
        "metadata": {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "totalChunks": len(chunks),
            "version": OUTPUT_VERSION,
        },
        "chunks": [chunk.to_record() for chunk in chunks],
    }


def save_chunks_to_json(chunks: list[Chunk], output_path: str | Path) -> Path:
    """Write chunks to a JSON file, creating parent directories as needed."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(chunks_to_document(chunks), f, indent=2, ensure_ascii=False)

    logger.info(f"Chunks saved to: {path}")
    return path
