from annotation_canvas.models import PageElement

PDF_PAGE_ATTR = "data-pdf-page"


def resolve_target(container: PageElement | None) -> PageElement | None:
    """컨테이너 안에서 실제 페이지 콘텐츠 노드를 찾음.

    img → data-pdf-page 노드 → canvas 순서로 탐색하고, 없으면 컨테이너 자신을 반환.
    """
    if container is None:
        return None

    target = (
        container.find(lambda el: el.tag == "img")
        or container.find(lambda el: PDF_PAGE_ATTR in el.attrs)
        or container.find(lambda el: el.tag == "canvas")
    )
    return target or container
