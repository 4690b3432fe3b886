"""Bulma form fields and controls, driven by values and update callbacks."""