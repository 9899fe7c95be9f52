#!/usr/bin/env python3
"""
Comment List Example

A plain component that renders comments, enhanced to read them from a data
source, skip redundant updates and expose a loader helper as a static.
"""

from hoc_py import (
    MemoryDataSource,
    component,
    compose,
    mounted,
    only_update_for_keys,
    with_data,
)


comments = MemoryDataSource({1: ["First!"], 2: []})


@component(props={"id": int, "comments": list})
def CommentList(props):
    """Render one line per comment."""
    lines = props.get("comments") or ["(no comments)"]
    return "\n".join(f"#{props['id']}: {line}" for line in lines)


CommentList.fetch_all = staticmethod(lambda source: [source.get(k) for k in (1, 2)])


CommentListWithData = compose(
    only_update_for_keys(["id"]),
    with_data(lambda source, props: source.get(props["id"], []), source=comments, prop_name="comments"),
)(CommentList)


def main():
    with mounted(CommentListWithData, {"id": 1}) as root:
        print(root.output)
        comments.set(1, ["First!", "Second"])
        print(root.output)
    print(f"listeners after unmount: {comments.listener_count}")


if __name__ == "__main__":
    main()
