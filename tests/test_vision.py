"""Image model helpers (no trained weights needed)."""

import json

import torch
from PIL import Image

from vision import (
    DEFAULT_CLASS_NAMES,
    build_model,
    infer_num_classes,
    load_class_names,
    prepare_image,
)


class TestInferNumClasses:
    def test_from_weight(self):
        state = {"classifier.1.weight": torch.zeros(9, 1280), "classifier.1.bias": torch.zeros(9)}
        assert infer_num_classes(state) == 9

    def test_from_bias_only(self):
        assert infer_num_classes({"module.classifier.1.bias": torch.zeros(4)}) == 4

    def test_unknown(self):
        assert infer_num_classes({"features.0.weight": torch.zeros(3)}) is None


class TestClassNames:
    def test_missing_file_uses_defaults(self, tmp_path):
        assert load_class_names(str(tmp_path / "nope.json")) == DEFAULT_CLASS_NAMES

    def test_reads_list(self, tmp_path):
        path = tmp_path / "classes.json"
        path.write_text(json.dumps(["Battery", "Organic"]))
        assert load_class_names(str(path)) == ["Battery", "Organic"]

    def test_wrong_shape_uses_defaults(self, tmp_path):
        path = tmp_path / "classes.json"
        path.write_text(json.dumps({"0": "Glass"}))
        assert load_class_names(str(path)) == DEFAULT_CLASS_NAMES


class TestPreprocessing:
    def test_prepare_image_shape(self):
        x = prepare_image(Image.new("L", (50, 30)))
        assert tuple(x.shape) == (1, 3, 224, 224)
        assert x.dtype == torch.float32

    def test_build_model_head(self):
        model = build_model(7)
        assert model.classifier[1].out_features == 7
