"""Bulma layout: containers, footers, heroes, levels, media objects, sections and tiles."""