"""Build a complete HTML document — zero config, zero deps."""

from tagloom import Page

page = Page(doctype=True)
html = page.html().lang("en")
head = html.head()
head.meta().charset("utf-8")
head.title_el().text("Hello")
body = html.body()
body.h1().text("Hello & welcome")
body.p().text("Built one tag at a time.")
print(page.finalize())
