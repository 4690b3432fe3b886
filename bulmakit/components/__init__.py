"""Bulma components: breadcrumbs, cards, dropdowns, menus, messages, modals, navbars, pagination, panels and tabs."""