"""Bulma elements: blocks, boxes, buttons, icons, images, progress bars, tables, tags and titles."""