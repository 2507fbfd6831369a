"""测试模型注册表"""

import pytest

from nihongo_proxy.config.models import (
    AI_MODELS,
    DEFAULT_MODEL,
    get_model_api_url,
    get_model_config,
    get_model_icon,
    get_model_name,
    list_models,
)


class TestModelRegistry:

    def test_default_model_is_first_entry(self):
        assert DEFAULT_MODEL == AI_MODELS[0].id == "gemini-3-flash-preview"

    def test_lookup_by_id(self):
        model = get_model_config("glm-4-flash")
        assert model.provider == "zhipu"
        assert "bigmodel.cn" in model.api_url

    @pytest.mark.parametrize("model_id", ["unknown-id", "", None])
    def test_unknown_id_falls_back_to_default(self, model_id):
        assert get_model_config(model_id) == AI_MODELS[0]

    def test_derived_accessors(self):
        assert get_model_api_url("qwen-plus") == (
            "https://dashscope.aliyuncs.com/compatible-mode/v1/chat/completions"
        )
        assert get_model_name("qwen-plus") == "qwen-plus"
        assert get_model_icon("qwen-plus") == "fa-bolt"
        assert get_model_icon("unknown-id") == "fa-robot"

    def test_entries_are_immutable(self):
        with pytest.raises(Exception):
            AI_MODELS[0].label = "changed"

    def test_list_models_returns_copy(self):
        models = list_models()
        models.clear()
        assert len(list_models()) == 3

    def test_ids_are_unique(self):
        ids = [model.id for model in AI_MODELS]
        assert len(ids) == len(set(ids))
