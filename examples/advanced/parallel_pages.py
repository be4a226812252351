"""One page per task: build 1000 fragments in parallel."""

from concurrent.futures import ThreadPoolExecutor

from tagloom import Page


def card(n: int) -> str:
    page = Page()
    article = page.frag("article").class_("card").data_attr("index", n)
    article.h2().text(f"Card {n}")
    article.p().text("Rendered on a worker thread.")
    return page.finalize()


with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(card, range(1000)))

print(f"Built {len(results)} cards in parallel")
print(results[0])
