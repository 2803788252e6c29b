"""
SVG Module
==========

Serializes Lewis drawing commands to an SVG document.
"""

import xml.dom.minidom as dom

from .render import CircleOp, LABEL_BACKGROUND, LineOp, TextOp, sort_ops


SVG_NS = 'http://www.w3.org/2000/svg'


def _num(value):
    return f"{value:.3f}".rstrip('0').rstrip('.')


def _element_under(parent, name, attributes):
    doc = parent.ownerDocument or parent
    el = doc.createElement(name)
    for key, value in attributes:
        el.setAttribute(key, value)
    parent.appendChild(el)
    return el


def ops_to_svg(ops, width, height, background=LABEL_BACKGROUND):
    """
    Render drawing commands as SVG text.

    The surface is first cleared with a ``background`` rectangle, then the
    commands are written in layer order.

    Args:
        ops (list): LineOp, CircleOp and TextOp commands
        width (float): Surface width
        height (float): Surface height
        background (str): Fill color of the surface, or None for transparent

    Returns:
        str: SVG document
    """
    doc = dom.Document()
    top = _element_under(doc, 'svg', (('xmlns', SVG_NS),
                                      ('version', '1.1'),
                                      ('width', _num(width)),
                                      ('height', _num(height)),
                                      ('viewBox', f"0 0 {_num(width)} {_num(height)}")))
    if background:
        _element_under(top, 'rect', (('x', '0'), ('y', '0'),
                                     ('width', _num(width)), ('height', _num(height)),
                                     ('fill', background)))

    for op in sort_ops(ops):
        if isinstance(op, LineOp):
            _element_under(top, 'line', (('x1', _num(op.p1[0])),
                                         ('y1', _num(op.p1[1])),
                                         ('x2', _num(op.p2[0])),
                                         ('y2', _num(op.p2[1])),
                                         ('stroke', op.color),
                                         ('stroke-width', _num(op.width))))
        elif isinstance(op, CircleOp):
            _element_under(top, 'circle', (('cx', _num(op.center[0])),
                                           ('cy', _num(op.center[1])),
                                           ('r', _num(op.radius)),
                                           ('fill', op.fill)))
        elif isinstance(op, TextOp):
            text = _element_under(top, 'text', (('x', _num(op.position[0])),
                                                ('y', _num(op.position[1])),
                                                ('fill', op.color),
                                                ('font-family', op.font_family),
                                                ('font-size', f"{_num(op.font_size)}px"),
                                                ('font-weight', op.font_weight),
                                                ('text-anchor', 'middle'),
                                                ('dominant-baseline', 'central')))
            text.appendChild(doc.createTextNode(op.text))

    return doc.toxml()
