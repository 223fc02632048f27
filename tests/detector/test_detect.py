"""End-to-end tests for detect()."""

from baseline_check.detector import DetectedFeature, Language, Status, Summary, detect
from baseline_check.export import export_json, load_json_export


class TestScenarios:
    def test_css_grid_snippet(self):
        result = detect(".box { display: grid; gap: 1rem; }", {"grid": True})
        assert DetectedFeature("grid", Status.BASELINE) in result.features
        assert result.language == Language.CSS

    def test_fetch_snippet(self):
        result = detect("fetch('/x').then(r => r.json())", {"fetch": False})
        assert result.features[0] == DetectedFeature("fetch", Status.NEEDS_FALLBACK)
        assert result.summary.needs_fallback == 1
        assert result.language == Language.JAVASCRIPT

    def test_empty_input(self):
        result = detect("", {"grid": True})
        assert result.features == ()
        assert result.summary == Summary(total=0, baseline=0, needs_fallback=0, unknown=0)
        assert result.language == Language.MIXED

    def test_all_three_families(self):
        text = (
            "<dialog open>Hi</dialog>\n"
            "<style>.layout { display: grid; }</style>\n"
            "<script>async function load() {}</script>"
        )
        result = detect(text, {})
        names = {f.feature for f in result.features}
        assert {"dialog", "grid", "async-await"} <= names
        assert all(f.status == Status.UNKNOWN for f in result.features)
        assert result.summary.unknown == result.summary.total
        assert result.language == Language.MIXED

    def test_whitespace_only(self):
        result = detect("   \n\t", {})
        assert result.features == ()
        assert result.language == Language.MIXED


class TestResultInvariants:
    TEXT = """
    .a { display: flex; aspect-ratio: 1; }
    const items = await Promise.allSettled(urls.map((u) => fetch(u)));
    <details><summary>More</summary></details>
    """
    DATASET = {"flexbox": True, "fetch": True, "promise-allsettled": False}

    def test_summary_matches_features(self):
        result = detect(self.TEXT, self.DATASET)
        summary = result.summary
        assert summary.total == len(result.features)
        assert summary.baseline + summary.needs_fallback + summary.unknown == summary.total

    def test_no_duplicates(self):
        result = detect(self.TEXT, self.DATASET)
        names = [f.feature for f in result.features]
        assert len(names) == len(set(names))

    def test_sorted(self):
        result = detect(self.TEXT, self.DATASET)
        order = {Status.BASELINE: 0, Status.NEEDS_FALLBACK: 1, Status.UNKNOWN: 2}
        keys = [(order[f.status], f.feature) for f in result.features]
        assert keys == sorted(keys)

    def test_deterministic(self):
        assert detect(self.TEXT, self.DATASET) == detect(self.TEXT, self.DATASET)

    def test_json_round_trip(self):
        result = detect(self.TEXT, self.DATASET)
        assert load_json_export(export_json(result)) == result
