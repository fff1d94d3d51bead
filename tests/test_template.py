from enum import Enum

import pytest

from restclient.errors import ExcessParametersError, TemplateResolutionError
from restclient.template import UriTemplate, build_query, to_param_string


class Sort(Enum):
    created = "created"
    long_running = "long-running"


class TestVariables:
    def test_variables_in_order(self):
        template = UriTemplate("/repos/{owner}/{repo}/pulls")
        assert template.variables == ["owner", "repo"]

    def test_duplicates_preserved(self):
        template = UriTemplate("/{a}/{b}/{a}")
        assert template.variables == ["a", "b", "a"]

    def test_no_variables(self):
        assert UriTemplate("/users").variables == []

    def test_regex_variable(self):
        template = UriTemplate("/users/{id: [0-9]+}/posts/{slug}")
        assert template.variables == ["id", "slug"]


class TestBind:
    def test_bind_all(self):
        template = UriTemplate("/repos/{owner}/{repo}")
        assert template.bind("tomitribe", "orange") == {"owner": "tomitribe", "repo": "orange"}

    def test_bind_fewer_values(self):
        template = UriTemplate("/repos/{owner}/{repo}")
        assert template.bind("tomitribe") == {"owner": "tomitribe"}

    def test_bind_excess_values(self):
        template = UriTemplate("/repos/{owner}/{repo}")
        with pytest.raises(ExcessParametersError) as exc_info:
            template.bind("a", "b", "c")
        assert exc_info.value.expected == 2
        assert exc_info.value.supplied == 3


class TestResolve:
    def test_resolve(self):
        template = UriTemplate("/repos/{owner}/{repo}/pulls")
        assert template.resolve({"owner": "tomitribe", "repo": "orange"}) == "/repos/tomitribe/orange/pulls"

    def test_resolve_encodes_segment(self):
        template = UriTemplate("/files/{name}")
        assert template.resolve({"name": "a b/c"}) == "/files/a%20b%2Fc"

    def test_resolve_missing_variable(self):
        template = UriTemplate("/repos/{owner}/{repo}")
        with pytest.raises(TemplateResolutionError) as exc_info:
            template.resolve({"owner": "tomitribe"})
        assert exc_info.value.variable == "repo"


class TestParamString:
    def test_enum_uses_value(self):
        assert to_param_string(Sort.long_running) == "long-running"

    def test_bool_lowercase(self):
        assert to_param_string(True) == "true"
        assert to_param_string(False) == "false"

    def test_number(self):
        assert to_param_string(42) == "42"


class TestBuildQuery:
    def test_empty(self):
        assert build_query({}) == ""

    def test_pairs(self):
        assert build_query({"state": "closed", "sort": Sort.long_running}) == "state=closed&sort=long-running"

    def test_list_repeats_key(self):
        assert build_query({"label": ["bug", "ui"]}) == "label=bug&label=ui"
