import pytest


MULTI_FILE_DIFF = """diff --git a/src/app.py b/src/app.py
index 1111111..2222222 100644
--- a/src/app.py
+++ b/src/app.py
@@ -10,3 +10,4 @@ def main():
 a
-b
+c
+d
 e
diff --git a/README.md b/README.md
index 3333333..4444444 100644
--- a/README.md
+++ b/README.md
@@ -1,6 +1,6 @@
 one
-two
+TWO
 three
 four
-five
+FIVE
 six
@@ -20,2 +20,3 @@ Usage
 intro
+added
 outro
"""


MALFORMED_DIFF = """diff --git a/one.txt b/one.txt
@@ -1 +1 @@
-1
+one
diff --git garbage-without-paths
whatever
diff --git a/two.txt b/two.txt
@@ -1 +1 @@
-2
+two
"""


@pytest.fixture()
def multi_diff():
    return MULTI_FILE_DIFF


@pytest.fixture()
def malformed_diff():
    return MALFORMED_DIFF


@pytest.fixture()
def diff_file(tmp_path):
    p = tmp_path / "cambios.diff"
    p.write_text(MULTI_FILE_DIFF, encoding="utf-8")
    return p
