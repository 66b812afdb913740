"""
项目类型识别测试
"""
import asyncio

from projecthop.explorer import ProjectType, classify, classify_directory, list_children
from projecthop.explorer.signatures import needs_dependencies

from tests.helpers import children_of, make_project


def test_rust_wins_over_package_json():
    children = children_of(".git", "Cargo.toml", "package.json")
    assert classify(children, ["react"]) == ProjectType.RUST


def test_marker_names_are_case_insensitive():
    assert classify(children_of("CARGO.TOML")) == ProjectType.RUST
    assert classify(children_of("PubSpec.yaml")) == ProjectType.DART


def test_xcodeproj_pattern():
    children = children_of("Demo.xcodeproj", "Sources", dirs=["Demo.xcodeproj", "Sources"])
    assert classify(children) == ProjectType.APPLESCRIPT


def test_android_needs_app_and_gradle():
    assert classify(children_of("app", "gradle", dirs=["app", "gradle"])) == ProjectType.ANDROID
    assert classify(children_of("app", dirs=["app"])) == ProjectType.UNKNOWN


def test_js_config_files():
    assert classify(children_of("package.json", "nuxt.config.js", "vue.config.js")) == ProjectType.NUXT
    assert classify(children_of("package.json", "vue.config.js")) == ProjectType.VUE
    assert classify(children_of("package.json", ".vscodeignore", "tsconfig.json")) == ProjectType.VSCODE


def test_js_dependencies():
    ts = children_of("package.json", "tsconfig.json")
    js = children_of("package.json")
    assert classify(ts, ["react", "react-dom"]) == ProjectType.REACT_TS
    assert classify(js, ["React"]) == ProjectType.REACT
    assert classify(js, ["hexo", "hexo-renderer-ejs"]) == ProjectType.HEXO
    assert classify(ts, ["lodash"]) == ProjectType.TYPESCRIPT
    assert classify(js, []) == ProjectType.JAVASCRIPT


def test_dependency_prefix_is_not_a_match():
    assert classify(children_of("package.json"), ["react-router"]) == ProjectType.JAVASCRIPT


def test_names_with_regex_metacharacters():
    assert classify(children_of("(Cargo).toml", "a|b")) == ProjectType.UNKNOWN


def test_classify_is_pure():
    children = children_of("package.json", "tsconfig.json")
    results = {classify(children, ["react"]) for _ in range(5)}
    assert results == {ProjectType.REACT_TS}


def test_needs_dependencies():
    assert needs_dependencies(children_of("package.json"))
    assert not needs_dependencies(children_of("package.json", "nuxt.config.js"))
    assert not needs_dependencies(children_of("Cargo.toml", "package.json"))
    assert not needs_dependencies(children_of("README.md"))


def test_classify_directory_reads_manifest(workspace):
    project = make_project(
        workspace, "blog",
        package={"dependencies": {"hexo": "^6.0.0"}, "devDependencies": {"eslint": "^8"}},
    )
    children = asyncio.run(list_children(project))
    assert asyncio.run(classify_directory(children)) == ProjectType.HEXO


def test_classify_directory_react_in_dev_dependencies(workspace):
    project = make_project(
        workspace, "ui",
        files=["tsconfig.json"],
        package={"devDependencies": {"react": "^18.0.0"}},
    )
    children = asyncio.run(list_children(project))
    assert asyncio.run(classify_directory(children)) == ProjectType.REACT_TS


def test_broken_manifest_is_unknown(workspace):
    project = make_project(workspace, "broken")
    (project / "package.json").write_text("{not json", encoding="utf-8")
    children = asyncio.run(list_children(project))
    assert asyncio.run(classify_directory(children)) == ProjectType.UNKNOWN


def test_broken_manifest_ignored_when_config_file_decides(workspace):
    project = make_project(workspace, "site", files=["nuxt.config.js"])
    (project / "package.json").write_text("[", encoding="utf-8")
    children = asyncio.run(list_children(project))
    assert asyncio.run(classify_directory(children)) == ProjectType.NUXT


def test_array_dependencies_are_not_broken(workspace):
    project = make_project(workspace, "tool", files=["tsconfig.json"], package={"dependencies": []})
    children = asyncio.run(list_children(project))
    assert asyncio.run(classify_directory(children)) == ProjectType.TYPESCRIPT
