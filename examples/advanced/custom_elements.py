"""Describe custom elements once and get typed classes for them."""

from tagloom import Page
from tagloom.elements.registry import ElementRegistryBuilder
from tagloom.elements.spec import TEXT, ElementSpec, attrs, flags, html_children

builder = ElementRegistryBuilder()
builder.register(
    ElementSpec(
        tag="todo-list",
        class_name="TodoList",
        description="Todo List",
        attrs=attrs("id", "title"),
        content=html_children("todo-item"),
    )
)
builder.register(
    ElementSpec(
        tag="todo-item",
        class_name="TodoItem",
        description="Todo Item",
        attrs=(*flags("done"), *attrs("due")),
        content=TEXT,
    )
)
registry = builder.build()

page = Page()
todos = page.frag(registry.get("todo-list")).title("Groceries")
todos.todo_item().done().text("Miso")
todos.todo_item().due("friday").text("Kombu")
print(page.finalize())
