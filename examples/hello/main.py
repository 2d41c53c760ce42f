from reflexion import h
from reflexion.dom import render

render(h("h2", {}, "Hello World!"))
