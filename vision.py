# vision.py
# On-server material classifier: EfficientNet-B0 fine-tuned on trash photos.
# The model is loaded lazily on the first prediction.
import json
import logging
from functools import lru_cache

import numpy as np
import torch
import torch.nn as nn
import torch.nn.functional as F
from PIL import Image
from torchvision import models

logger = logging.getLogger(__name__)

NUM_CLASSES_FALLBACK = 6
DEFAULT_CLASS_NAMES = ["Cardboard", "Glass", "Metal", "Paper", "Plastic", "Trash"]
MEAN = np.array([0.485, 0.456, 0.406], dtype=np.float32)
STD = np.array([0.229, 0.224, 0.225], dtype=np.float32)

device = torch.device("cuda" if torch.cuda.is_available() else "cpu")


def infer_num_classes(state_dict: dict) -> int | None:
    for k, v in state_dict.items():
        if k.endswith("classifier.1.weight") and hasattr(v, "shape"):
            return int(v.shape[0])
    for k, v in state_dict.items():
        if k.endswith("classifier.1.bias") and hasattr(v, "shape"):
            return int(v.shape[0])
    return None


def _in_features(classifier: nn.Module) -> int:
    if isinstance(classifier, nn.Linear):
        return int(classifier.in_features)
    if isinstance(classifier, nn.Sequential):
        for mod in reversed(classifier):
            if isinstance(mod, nn.Linear):
                return int(mod.in_features)
    return 1280


def load_class_names(path: str) -> list[str]:
    try:
        with open(path, "r") as f:
            classes = json.load(f)
    except (OSError, ValueError):
        logger.info("class names not readable at %s, using defaults", path)
        return list(DEFAULT_CLASS_NAMES)
    if isinstance(classes, list) and all(isinstance(x, str) for x in classes):
        return classes
    logger.warning("class names at %s are not a list of strings, using defaults", path)
    return list(DEFAULT_CLASS_NAMES)


def build_model(num_classes: int) -> nn.Module:
    model = models.efficientnet_b0(weights=None)
    in_features = _in_features(model.classifier)
    model.classifier = nn.Sequential(nn.Dropout(0.2), nn.Linear(in_features, num_classes))
    return model


@lru_cache(maxsize=None)
def load_model(state_path: str) -> nn.Module:
    state = torch.load(state_path, map_location="cpu")
    num_classes = infer_num_classes(state) or NUM_CLASSES_FALLBACK
    model = build_model(num_classes)
    missing, unexpected = model.load_state_dict(state, strict=False)
    if missing or unexpected:
        logger.warning("model %s: %d missing, %d unexpected keys",
                       state_path, len(missing), len(unexpected))
    model.eval()
    return model.to(device)


def prepare_image(img: Image.Image) -> torch.Tensor:
    img = img.convert("RGB").resize((224, 224))
    arr = np.array(img).astype(np.float32) / 255.0
    arr = (arr - MEAN) / STD
    arr = np.transpose(arr, (2, 0, 1))
    return torch.from_numpy(arr).unsqueeze(0).to(device)


def predict(img: Image.Image, state_path: str, class_names: list[str]) -> tuple[str, float]:
    """Top-1 (label, confidence) for an image."""
    model = load_model(state_path)
    x = prepare_image(img)
    with torch.no_grad():
        probs = F.softmax(model(x), dim=1).cpu().numpy()[0]
    idx = int(np.argmax(probs))
    label = class_names[idx] if 0 <= idx < len(class_names) else f"Class_{idx}"
    return label, float(probs[idx])
