from homepage.repos.posts_repo import FilesystemPostsRepo


def write(path, text="---\ntitle: x\n---\nbody"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_list_blog_docs_filters_extensions_and_recurses(tmp_path):
    write(tmp_path / "a.mdx")
    write(tmp_path / "b.md")
    write(tmp_path / "notes.txt")
    write(tmp_path / "2021" / "nested.mdx")

    docs = FilesystemPostsRepo(tmp_path).list_blog_docs()

    assert [d["filePath"] for d in docs] == ["2021/nested.mdx", "a.mdx", "b.md"]
    assert docs[1]["source"].startswith("---")


def test_list_blog_docs_missing_dir_is_empty(tmp_path):
    assert FilesystemPostsRepo(tmp_path / "nope").list_blog_docs() == []


def test_get_blog_doc_prefers_mdx(tmp_path):
    write(tmp_path / "hello.md", "md")
    write(tmp_path / "hello.mdx", "mdx")

    doc = FilesystemPostsRepo(tmp_path).get_blog_doc("hello")

    assert doc == {"filePath": "hello.mdx", "source": "mdx"}


def test_get_blog_doc_falls_back_to_md(tmp_path):
    write(tmp_path / "2020" / "old.md", "old")

    doc = FilesystemPostsRepo(tmp_path).get_blog_doc("2020/old")

    assert doc == {"filePath": "2020/old.md", "source": "old"}


def test_get_blog_doc_missing_returns_none(tmp_path):
    assert FilesystemPostsRepo(tmp_path).get_blog_doc("missing") is None


def test_get_blog_doc_rejects_traversal(tmp_path):
    posts = tmp_path / "posts"
    posts.mkdir()
    write(tmp_path / "outside.md", "secret")

    assert FilesystemPostsRepo(posts).get_blog_doc("../outside") is None
