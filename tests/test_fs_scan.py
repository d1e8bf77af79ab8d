import os

from assetscan.fs_scan import find_source_files, source_dir, to_package_name


def test_find_source_files_directory_then_lexical(tmp_path):
	for rel in ["b.py", "a.py", "notes.txt", "zz/x.py", "aa/y.py", "aa/deep/z.py", "node_modules/m.py"]:
		p = tmp_path / rel
		p.parent.mkdir(parents=True, exist_ok=True)
		p.write_text("")
	files = [os.path.relpath(f, tmp_path) for f in find_source_files(str(tmp_path))]
	assert files == [
		"a.py",
		"b.py",
		os.path.join("aa", "y.py"),
		os.path.join("aa", "deep", "z.py"),
		os.path.join("zz", "x.py"),
	]


def test_find_source_files_custom_exclusions(tmp_path):
	(tmp_path / "vendor").mkdir()
	(tmp_path / "vendor" / "v.py").write_text("")
	(tmp_path / "m.py").write_text("")
	files = find_source_files(str(tmp_path), exclude_dirs=["vendor"])
	assert files == [str(tmp_path / "m.py")]


def test_package_and_source_dir_names():
	assert source_dir("pkg/mod.py") == "pkg"
	assert source_dir("mod.py") == "."
	assert to_package_name("src/my-app") == "my_app"
	assert to_package_name("src/my-app/") == "my_app"
